"""
sqlbuf - a bare bones, no-magic query builder

Code is organized in two small layers
- params is the placeholder/token convention and the presence test
- builder accumulates text in select/from/where/order buffers

Nothing here parses, validates or executes SQL
"""

from sqlbuf.builder import Builder
from sqlbuf.params import (
    Ref,
    ParamStyle,
    POSTGRES,
    is_absent,
    substitute,
)
from sqlbuf.config import load_style, list_styles

__version__ = "0.1.0"
__all__ = [
    # Builder
    "Builder",
    # Parameters
    "Ref",
    "ParamStyle",
    "POSTGRES",
    "is_absent",
    "substitute",
    # Configuration
    "load_style",
    "list_styles",
]
