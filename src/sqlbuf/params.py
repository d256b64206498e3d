"""Placeholder substitution and parameter presence rules"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    """Mutable reference to a value that may be unset

    A ``Ref`` is never None itself, but it is treated as absent by the
    conditional builder methods when it wraps None.

    Example:
        >>> name: Ref[str] = Ref()
        >>> is_absent(name)
        True
        >>> name.value = "HR"
        >>> is_absent(name)
        False
    """

    value: Optional[T] = None


def is_absent(value: Any) -> bool:
    """Check whether a candidate parameter should be skipped

    Only one level of indirection is inspected: ``None`` and ``Ref(None)``
    are absent, everything else (including falsy values) is present.
    """
    if value is None:
        return True
    return isinstance(value, Ref) and value.value is None


@dataclass(frozen=True)
class ParamStyle:
    """Placeholder marker and positional token format"""

    marker: str = "?"
    prefix: str = "$"

    def __post_init__(self):
        for field_name in ("marker", "prefix"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise ValueError(
                    f"ParamStyle {field_name} must be a string, not {type(value).__name__}"
                )
        if not self.marker:
            raise ValueError("ParamStyle marker cannot be empty")

    def token(self, position: int) -> str:
        """Render the token for a 1-based parameter position"""
        return f"{self.prefix}{position}"


POSTGRES = ParamStyle()


def substitute(text: str, positions: Iterable[int], style: ParamStyle = POSTGRES) -> str:
    """Replace successive markers in text with positional tokens

    The scan runs once, left to right, and stops as soon as either the
    markers or the positions run out. Markers left over stay as literal text.

    Example:
        >>> substitute("id=? AND status=? AND type=?", [1, 2])
        'id=$1 AND status=$2 AND type=?'
    """
    marker = style.marker
    chunks: list[str] = []
    start = 0
    for position in positions:
        found = text.find(marker, start)
        if found < 0:
            break
        chunks.append(text[start:found])
        chunks.append(style.token(position))
        start = found + len(marker)

    if not chunks:
        return text

    chunks.append(text[start:])
    return "".join(chunks)
