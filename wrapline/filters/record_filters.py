import logging
from typing import Any

from wrapline.core.filter_interface import Filter
from wrapline.core.models import Record

logger = logging.getLogger(__name__)

ESCAPE_CHAR = b"\\"


class Identity(Filter):
    """Returns the record unchanged. Used for testing and debugging."""

    def apply(self, record: Record) -> Record:
        return record


class StripWhitespace(Filter):
    """
    Trims leading and trailing whitespace, Unicode whitespace included
    (e.g. U+00A0 NO-BREAK SPACE, U+2003 EM SPACE).
    The content is read as UTF-8; bytes which are not valid UTF-8 are kept as they are.
    """

    def apply(self, record: Record) -> Record:
        """
        >>> StripWhitespace()(b"  hello\\t")
        b'hello'
        >>> StripWhitespace()("\\u00a0hello\\u2003".encode("utf-8"))
        b'hello'
        """
        text = record.data.decode("utf-8", errors="surrogateescape")
        record.data = text.strip().encode("utf-8", errors="surrogateescape")
        return record


class DiscardEmptyLastRecord(Filter):
    """
    Drops the last record of the stream when it is empty.
    Always part of the pipeline, so a trailing separator never yields an empty pair.
    """

    def apply(self, record: Record) -> Record:
        """
        >>> DiscardEmptyLastRecord().apply(Record(b"", is_last=True)).is_rejected
        True
        >>> DiscardEmptyLastRecord().apply(Record(b"")).is_rejected
        False
        """
        if record.is_last and not record.data:
            record.is_rejected = True
        return record


class DiscardEmptyRecords(Filter):
    """Drops every empty record, wherever it occurs in the stream."""

    def apply(self, record: Record) -> Record:
        if not record.data:
            record.is_rejected = True
        return record


class EscapeDelimiter(Filter):
    """
    Prefixes each non-overlapping occurrence of the delimiter with a backslash.
    Other backslashes are left as they are.
    """

    def __init__(self, delimiter: bytes, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._delimiter = delimiter
        self._escaped = ESCAPE_CHAR + delimiter
        self.delimiter = delimiter.decode("utf-8", errors="replace")

    def apply(self, record: Record) -> Record:
        """
        >>> EscapeDelimiter(b'"')(b'She said "hello"')
        b'She said \\\\"hello\\\\"'
        """
        if self._delimiter:
            record.data = record.data.replace(self._delimiter, self._escaped)
        return record


class WrapDelimiter(Filter):
    """
    Places the delimiter on both sides of the record.

    >>> WrapDelimiter(b"[]")(b"data")
    b'[]data[]'
    """

    def __init__(self, delimiter: bytes, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._delimiter = delimiter
        self.delimiter = delimiter.decode("utf-8", errors="replace")

    def apply(self, record: Record) -> Record:
        record.data = self._delimiter + record.data + self._delimiter
        return record


if __name__ == "__main__":
    import doctest

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s]%(name)s:%(message)s"))
    logging.getLogger().addHandler(handler)
    logging.getLogger().setLevel(logging.DEBUG)

    doctest.testmod()
