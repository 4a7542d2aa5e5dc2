"""
FixedLengthRecordReader: decodes one fixed-length record left to right.

The reader holds a single line of text and a cursor. Each ``read_*`` method
takes the next N characters, converts them to a typed value and advances the
cursor by N. A read that fails raises :class:`FixedLengthParseError` and leaves
the cursor where it was.

Example::

    reader = FixedLengthRecordReader("000321PRODUCT   2025-11-125.23")
    reader.read_int(6)                  # 321
    reader.read_string(10)              # "PRODUCT   "
    reader.read_extended_iso_date()     # datetime.date(2025, 11, 12)
    reader.read_double(4)               # 5.23
"""
from __future__ import annotations
import datetime
import logging
import re
from decimal import Decimal
from typing import Callable, Optional, TypeVar

from .exceptions import FixedLengthParseError
from .utils.date_parser import (
    basic_to_extended_date,
    basic_to_extended_datetime,
    basic_to_extended_time,
    is_blank,
    parse_extended_date,
    parse_extended_datetime,
    parse_extended_time,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

INT_MIN, INT_MAX = -(2 ** 31), 2 ** 31 - 1
LONG_MIN, LONG_MAX = -(2 ** 63), 2 ** 63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# ---------------------------------------------------------------------------
# Conversion helpers
# ---------------------------------------------------------------------------

def _parse_integer(token: str, low: int, high: int) -> int:
    if not _INTEGER_RE.fullmatch(token):
        raise ValueError(f"bad integer: {token!r}")
    value = int(token)
    if not low <= value <= high:
        raise ValueError(f"integer out of range [{low}, {high}]: {token!r}")
    return value


def _parse_decimal(token: str, decimals: Optional[int] = None) -> float:
    """Parse a decimal literal, scaling by 10^-decimals when given."""
    if not _DECIMAL_RE.fullmatch(token):
        raise ValueError(f"bad number: {token!r}")
    value = Decimal(token.strip())
    if decimals:
        value = value.scaleb(-decimals)
    return float(value)


def _parse_hex_byte(token: str) -> int:
    if len(token) != 2 or not set(token) <= _HEX_DIGITS:
        raise ValueError(f"bad hex byte: {token!r}")
    return (int(token[0], 16) << 4) + int(token[1], 16)


def _check_decimals(decimals: Optional[int]) -> None:
    if decimals is not None and decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")


class FixedLengthRecordReader:
    """
    Cursor over a single fixed-length record.

    Instances are not thread-safe; use one reader per line.

    :param buffer: The text of the record. It is never modified.
    """

    def __init__(self, buffer: str) -> None:
        self._buffer = buffer
        self._pos = 0

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def position(self) -> int:
        """Offset of the next character to be read."""
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"FixedLengthRecordReader(position={self._pos}, buffer={self._buffer!r})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _error(self, message: str, offset: int, cause: Optional[BaseException] = None) -> FixedLengthParseError:
        logger.debug("%s (offset=%d, cause=%r)", message, offset, cause)
        return FixedLengthParseError(message, offset, cause)

    def _range_message(self, kind: str, start: int, end: int) -> str:
        article = "an" if kind[0] in "aeiou" else "a"
        return f"Error getting {article} {kind} from {start} to {end} in string [{self._buffer}]"

    def _read(
            self,
            length: int,
            kind: str,
            convert: Callable[[str], T],
            message: Optional[str] = None,
    ) -> T:
        """Slice ``length`` characters, convert them and advance only on success.

        :param length: Number of characters to consume.
        :param kind: Value kind used in error messages.
        :param convert: Conversion applied to the slice; raises ``ValueError`` on bad input.
        :param message: Overrides the default range message.
        :raises FixedLengthParseError: on bounds or conversion failure.
        """
        start = self._pos
        end = start + length
        message = message or self._range_message(kind, start, end)
        if length < 0 or end > len(self._buffer):
            raise self._error(message, start)
        token = self._buffer[start:end]
        try:
            value = convert(token)
        except (ValueError, ArithmeticError) as exc:
            raise self._error(message, start, exc) from exc
        self._pos = end
        return value

    def _read_temporal(self, length: int, kind: str, convert: Callable[[str], T]) -> Optional[T]:
        def convert_or_blank(token: str) -> Optional[T]:
            if is_blank(token):
                return None
            return convert(token)

        return self._read(length, kind, convert_or_blank)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def read_string(self, length: int) -> str:
        """Return the next ``length`` characters untouched (no trimming)."""
        return self._read(length, "String", str)

    def read_char(self) -> str:
        """Return the next single character.

        :raises FixedLengthParseError: if the buffer is exhausted.
        """
        start = self._pos
        message = f"Error getting a char from {start} in string [{self._buffer}]"
        return self._read(1, "char", str, message=message)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def read_byte(self, with_prefix: bool = False) -> int:
        """
        Return a byte (0-255) from its two-digit hexadecimal representation.

        With ``with_prefix`` the value is expected in ``0xXX`` form: four
        characters are consumed and the first two are ignored. Otherwise two
        characters are consumed. ``"0D"`` and ``"0x0D"`` both give 13.

        :param with_prefix: Whether the value carries a two-character prefix.
        :raises FixedLengthParseError: on a short buffer or a non-hex digit.
        """
        start = self._pos
        message = (
            f"Error getting a byte from {start} {'with' if with_prefix else 'without'} "
            f"prefix in string [{self._buffer}]"
        )
        if with_prefix:
            return self._read(4, "byte", lambda token: _parse_hex_byte(token[2:]), message=message)
        return self._read(2, "byte", _parse_hex_byte, message=message)

    def read_int(self, length: int) -> int:
        """Parse the next ``length`` characters as a base-10 signed 32-bit integer."""
        return self._read(length, "int", lambda token: _parse_integer(token, INT_MIN, INT_MAX))

    def read_long(self, length: int) -> int:
        """Parse the next ``length`` characters as a base-10 signed 64-bit integer."""
        return self._read(length, "long", lambda token: _parse_integer(token, LONG_MIN, LONG_MAX))

    def read_float(self, length: int, decimals: Optional[int] = None) -> float:
        """
        Parse the next ``length`` characters as a floating point number.

        Without ``decimals`` the slice is a plain decimal literal (``005.234``).
        With ``decimals`` the decimal point is implied: ``005234`` read with
        ``decimals=3`` gives 5.234. ``decimals=0`` applies no scaling.

        :param length: Number of characters to parse.
        :param decimals: Number of implied decimal digits.
        :raises ValueError: if ``decimals`` is negative.
        :raises FixedLengthParseError: on a short buffer or a bad literal.
        """
        _check_decimals(decimals)
        return self._read(length, "float", lambda token: _parse_decimal(token, decimals))

    def read_double(self, length: int, decimals: Optional[int] = None) -> float:
        """Same as :meth:`read_float`; reported as ``double`` in error messages."""
        _check_decimals(decimals)
        return self._read(length, "double", lambda token: _parse_decimal(token, decimals))

    # ------------------------------------------------------------------
    # Dates and times
    #
    # Every temporal read returns None for an empty, all-blank or
    # "00000000" slice, still consuming its width.
    # ------------------------------------------------------------------

    def read_basic_iso_date(self) -> Optional[datetime.date]:
        """Read 8 characters as ``YYYYMMDD``."""
        return self._read_temporal(
            8, "date", lambda token: parse_extended_date(basic_to_extended_date(token))
        )

    def read_extended_iso_date(self) -> Optional[datetime.date]:
        """Read 10 characters as ``YYYY-MM-DD``."""
        return self._read_temporal(10, "date", parse_extended_date)

    def read_basic_iso_time(self) -> Optional[datetime.time]:
        """Read 6 characters as ``HHMMSS``."""
        return self._read_temporal(
            6, "time", lambda token: parse_extended_time(basic_to_extended_time(token))
        )

    def read_extended_iso_time(self) -> Optional[datetime.time]:
        """Read 8 characters as ``HH:MM:SS``."""
        return self._read_temporal(8, "time", parse_extended_time)

    def read_basic_iso_datetime(self, time_offset: bool = False) -> Optional[datetime.datetime]:
        """
        Read ``YYYYMMDDTHHMMSS`` (15 characters) or, with ``time_offset``,
        ``YYYYMMDDTHHMMSS+HHMM`` (20 characters).

        An offset-bearing value is converted to UTC, so ``20250725T091123+0200``
        gives ``2025-07-25 07:11:23+00:00``. Without an offset the result is naive.
        """
        return self._read_temporal(
            20 if time_offset else 15,
            "datetime",
            lambda token: parse_extended_datetime(basic_to_extended_datetime(token), time_offset),
        )

    def read_extended_iso_datetime(self, time_offset: bool = False) -> Optional[datetime.datetime]:
        """
        Read ``YYYY-MM-DDTHH:MM:SS`` (19 characters) or, with ``time_offset``,
        ``YYYY-MM-DDTHH:MM:SS+HH:MM`` (25 characters), converting to UTC when an
        offset is present.
        """
        return self._read_temporal(
            25 if time_offset else 19,
            "datetime",
            lambda token: parse_extended_datetime(token, time_offset),
        )


__all__ = ["FixedLengthRecordReader"]
