"""
Presence-tracking wrapper for JSON fields that may be null or absent.
"""

from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from ..core.exceptions import DecodeError

T = TypeVar("T")


class Nullable(Generic[T]):
    """
    A value that is either present or absent.

    Decoding treats a missing key and the JSON literal null the same way:
    both produce an absent value. Zero values are never used to signal
    absence.
    """

    __slots__ = ("_value", "_present")

    def __init__(self, value: Optional[T] = None, present: bool = False):
        self._value = value if present else None
        self._present = present

    @classmethod
    def of(cls, value: T) -> "Nullable[T]":
        """Create a present value."""
        return cls(value, True)

    @classmethod
    def absent(cls) -> "Nullable[T]":
        """Create an absent value."""
        return cls()

    @classmethod
    def from_json(
        cls,
        payload: Mapping[str, Any],
        key: str,
        parser: Optional[Callable[[Any], T]] = None
    ) -> "Nullable[T]":
        """
        Decode a field from a JSON object.

        Args:
            payload: Decoded JSON object
            key: Field name
            parser: Converts the raw token into T; TypeError or ValueError
                    raised by it become DecodeError

        Returns:
            Nullable holding the parsed value, or an absent Nullable

        Raises:
            DecodeError: If the token cannot be parsed
        """
        raw = payload.get(key)
        if raw is None:
            return cls()
        if parser is None:
            return cls(raw, True)
        try:
            return cls(parser(raw), True)
        except DecodeError:
            raise
        except (TypeError, ValueError) as e:
            raise DecodeError(f"failed to decode field '{key}': {e}") from e

    def get(self) -> Optional[T]:
        """Return the value; None when absent."""
        return self._value

    def get_or(self, default: T) -> T:
        """Return the value, or default when absent."""
        return self._value if self._present else default

    def is_present(self) -> bool:
        return self._present

    def is_absent(self) -> bool:
        return not self._present

    def reset(self) -> None:
        """Clear the value back to the absent state."""
        self._value = None
        self._present = False

    def __bool__(self) -> bool:
        return self._present

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nullable):
            return NotImplemented
        return self._present == other._present and self._value == other._value

    def __repr__(self) -> str:
        if not self._present:
            return "Nullable(<absent>)"
        return f"Nullable({self._value!r})"


def parse_float(value: Any) -> float:
    """Strictly parse a JSON number; booleans and strings are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected number, got {type(value).__name__}")
    return float(value)


def parse_int(value: Any) -> int:
    """Strictly parse a JSON integer (integral floats are accepted)."""
    if isinstance(value, bool):
        raise TypeError("expected integer, got bool")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise TypeError(f"expected integer, got {type(value).__name__}")
    return value


def parse_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return value


def parse_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected boolean, got {type(value).__name__}")
    return value


def require_float(payload: Mapping[str, Any], key: str) -> float:
    """
    Read a mandatory numeric field from a JSON object.

    Raises:
        DecodeError: If the field is missing, null or not a number
    """
    try:
        return parse_float(payload.get(key))
    except TypeError as e:
        raise DecodeError(f"invalid or missing '{key}': {e}") from e
