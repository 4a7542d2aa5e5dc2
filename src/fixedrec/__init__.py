"""Sequential decoder for fixed-length text records."""
from .exceptions import FixedLengthParseError
from .reader import FixedLengthRecordReader

__version__ = "0.1.0"

__all__ = [
    "FixedLengthParseError",
    "FixedLengthRecordReader",
    "__version__",
]
