from __future__ import annotations
import logging
from typing import List, TextIO

logger = logging.getLogger(__name__)

DEFAULT_ENCODINGS = ["utf-8-sig", "utf-8", "cp1252", "latin-1"]


def open_text_auto(path: str, encodings: List[str] | None = None) -> TextIO:
    """
    Open a record file as text, trying each encoding in priority order.

    An encoding is accepted only if the whole file decodes with it, so a file
    of fixed-length records never switches encoding halfway through. Falls back
    to utf-8 with replacement characters when nothing matches.

    :param path: Path of the file to open.
    :param encodings: Encodings to try, most preferred first.
    :return: A text handle positioned at the start of the file. Newlines are
        left untranslated.
    """
    encs = encodings or DEFAULT_ENCODINGS
    for enc in encs:
        try:
            with open(path, "r", encoding=enc, newline="") as probe:
                for _ in probe:
                    pass
        except (LookupError, UnicodeDecodeError) as e:
            logger.debug("encoding %s rejected for %s: %s", enc, path, e)
            continue
        logger.debug("opening %s as %s", path, enc)
        return open(path, "r", encoding=enc, newline="")
    logger.debug("no encoding in %s fits %s; decoding utf-8 with replacement", encs, path)
    return open(path, "r", encoding="utf-8", errors="replace", newline="")
