"""
wrapline reads a file or STDIN line by line (or NUL-terminated record by record)
and wraps each line with a delimiter.

```python
import io
import wrapline

out = io.BytesIO()
wrapline.run(io.BytesIO(b"hello\nworld\n"), out, wrapline.WrapConfig())
assert out.getvalue() == b'"hello"\n"world"\n'
```
"""

from .core.composition import Compose
from .core.config import WrapConfig
from .core.delimiter import resolve_delimiter
from .core.errors import (
    DelimiterError,
    DelimiterOutOfRange,
    InvalidDelimiterSyntax,
    WraplineError,
)
from .core.filter_interface import Filter
from .core.models import Record, Statistics
from .core.pipeline import build_pipeline, run
from .filters import record_filters

PROGRAM_NAME = "wrapline"
PROGRAM_URL = "https://github.com/jftuga/wrapline"
__version__ = "1.1.6"

__all__ = [
    "core",
    "filters",
    "utils",
    "Compose",
    "Filter",
    "Record",
    "Statistics",
    "WrapConfig",
    "resolve_delimiter",
    "build_pipeline",
    "run",
    "record_filters",
    "WraplineError",
    "DelimiterError",
    "InvalidDelimiterSyntax",
    "DelimiterOutOfRange",
]
