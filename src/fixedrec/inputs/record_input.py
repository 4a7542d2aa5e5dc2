"""
RecordInput: reads a text file of fixed-length records, one per line.

This is only a line source. It does not know the record layout; each line is
handed to the caller wrapped in a :class:`FixedLengthRecordReader`, and the
caller decodes the fields in physical order.

:class RecordInput: Line source for fixed-length record files.
:method iter_lines: Yields each record line with its terminator removed.
:method iter_records: Yields a FixedLengthRecordReader per record line.
"""
from __future__ import annotations
import logging
from typing import Any, Iterator

from ..reader import FixedLengthRecordReader
from ..utils.encoding import open_text_auto

logger = logging.getLogger(__name__)


class RecordInput:
    """
    Line source for fixed-length record files.

    :param source: Path of the file to read.
    :type source: str
    :param opts: Options:
        ``encoding_priority`` (list of encodings to try, default: see
        :func:`open_text_auto`), ``skip_blank`` (skip whitespace-only lines,
        default ``True``), ``comment_prefix`` (skip lines starting with this
        text, default ``None``).
    """

    def __init__(self, source: str, **opts: Any):
        self.source = source
        self.opts = opts

    def iter_lines(self) -> Iterator[str]:
        """
        Iterate over the record lines of the file.

        Only the line terminator (``\\r\\n`` or ``\\n``) is removed; trailing
        spaces are part of the record and are kept.

        :return: Yields record lines.
        :rtype: Iterator[str]
        """
        skip_blank = self.opts.get("skip_blank", True)
        comment_prefix = self.opts.get("comment_prefix")
        skipped = 0
        with open_text_auto(self.source, self.opts.get("encoding_priority")) as fh:
            for raw in fh:
                line = raw.rstrip("\r\n")
                if skip_blank and not line.strip():
                    skipped += 1
                    continue
                if comment_prefix and line.startswith(comment_prefix):
                    skipped += 1
                    continue
                yield line
        logger.debug("finished reading %s (%d lines skipped)", self.source, skipped)

    def iter_records(self) -> Iterator[FixedLengthRecordReader]:
        """
        Iterate over the file, wrapping each record line in a reader.

        :return: Yields one reader per record line.
        :rtype: Iterator[FixedLengthRecordReader]
        """
        for line in self.iter_lines():
            yield FixedLengthRecordReader(line)
