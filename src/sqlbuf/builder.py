"""Bare bones accumulator for parameterized query text"""

import logging
from typing import Any, Union

from sqlbuf.params import POSTGRES, ParamStyle, Ref, is_absent, substitute

logger = logging.getLogger(__name__)


class Builder:
    """Accumulate query text and positional parameters, piece by piece

    Text goes into four buffers (select, from, where, order) that are
    always rendered in that order, with nothing inserted between them.
    Every marker substituted while appending consumes the next parameter
    position, so ``$n`` always refers to ``params()[n - 1]``.

    Example:
        >>> b = Builder()
        >>> b.add("SELECT id, name").from_(" FROM employees")
        Builder('SELECT id, name FROM employees', params=0)
        >>> b.where(" WHERE 1=1").where_if(" AND dept = ?", "HR")
        Builder('SELECT id, name FROM employees WHERE 1=1 AND dept = $1', params=1)
        >>> b.as_tuple()
        ('SELECT id, name FROM employees WHERE 1=1 AND dept = $1', ('HR',))
    """

    def __init__(self, style: Union[None, str, ParamStyle] = None):
        """Initialize with a style name, a ParamStyle instance or the default"""
        if style is None:
            self.style = POSTGRES
        elif isinstance(style, ParamStyle):
            self.style = style
        elif isinstance(style, str):
            from sqlbuf.config import load_style

            self.style = load_style(style)
        else:
            raise TypeError(
                f"style must be a style name or ParamStyle, not {type(style).__name__}"
            )

        self._select: list[str] = []
        self._from: list[str] = []
        self._where: list[str] = []
        self._order: list[str] = []
        self._params: list[Any] = []

    def params(self) -> list[Any]:
        """Copy of the current parameters, holes included as None"""
        return list(self._params)

    def add(self, sql: str, *values: Any) -> "Builder":
        """Unconditionally append to the select buffer"""
        self._append(self._select, sql, values)
        return self

    def add_if(self, sql: str, value: Any) -> "Builder":
        """Append to the select buffer only if value is present"""
        self._append_if(self._select, sql, value)
        return self

    def from_(self, sql: str, *values: Any) -> "Builder":
        """Unconditionally append to the from buffer"""
        self._append(self._from, sql, values)
        return self

    def from_if(self, sql: str, value: Any) -> "Builder":
        """Append to the from buffer only if value is present"""
        self._append_if(self._from, sql, value)
        return self

    def where(self, sql: str, *values: Any) -> "Builder":
        """Unconditionally append to the where buffer"""
        self._append(self._where, sql, values)
        return self

    def where_if(self, sql: str, value: Any) -> "Builder":
        """Append to the where buffer only if value is present"""
        self._append_if(self._where, sql, value)
        return self

    def order(self, sql: str, *values: Any) -> "Builder":
        """Unconditionally append to the order buffer"""
        self._append(self._order, sql, values)
        return self

    def order_if(self, sql: str, value: Any) -> "Builder":
        """Append to the order buffer only if value is present"""
        self._append_if(self._order, sql, value)
        return self

    add_from = from_
    add_where = where
    add_order = order

    def set_param(self, index: int, value: Any) -> None:
        """Set the value of a 1-based positional parameter

        Setting past the end grows the list, filling the gap with None.
        The list never shrinks and the text buffers are not touched.
        """
        if index < 1:
            raise ValueError(f"Parameter index must be 1 or greater, got {index}")

        missing = index - len(self._params)
        if missing > 0:
            logger.debug("Growing parameters from %d to %d", len(self._params), index)
            self._params.extend([None] * missing)

        self._params[index - 1] = value

    def render(self) -> str:
        """Concatenated buffers in select, from, where, order order"""
        return "".join(self._select + self._from + self._where + self._order)

    def as_tuple(self) -> tuple[str, tuple[Any, ...]]:
        """Get both SQL and parameters, ready for cursor.execute(*...)"""
        return self.render(), tuple(self._params)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Builder({self.render()!r}, params={len(self._params)})"

    def _load(self, sql: str, values: tuple[Any, ...]) -> str:
        first = len(self._params) + 1
        self._params.extend(values)

        marker_count = sql.count(self.style.marker)
        if len(values) > marker_count:
            logger.debug(
                "%d value(s) have no matching %r in %r",
                len(values) - marker_count, self.style.marker, sql
            )

        return substitute(sql, range(first, first + len(values)), self.style)

    def _append(self, buffer: list[str], sql: str, values: tuple[Any, ...]) -> None:
        text = self._load(sql, values)
        if text:
            buffer.append(text)

    def _append_if(self, buffer: list[str], sql: str, value: Any) -> None:
        if is_absent(value):
            logger.debug("Skipping %r: value is absent", sql)
            return

        if isinstance(value, Ref):
            value = value.value

        self._append(buffer, sql, (value,))
