import argparse
from dataclasses import dataclass

from wrapline.core.delimiter import encode_delimiter, resolve_delimiter

DEFAULT_DELIMITER = '"'
NEWLINE = b"\n"
NUL = b"\x00"


@dataclass(frozen=True)
class WrapConfig:
    """
    Settings of one wrapline run. Built once before processing and never mutated.

    Attributes:
        delimiter (str): Delimiter token; a `0x` prefix denotes a hexadecimal code point.
        strip (bool): Trim leading and trailing whitespace from each record.
        skip_empty (bool): Drop empty records in the middle of the stream.
            An empty last record is always dropped.
        escape (bool): Prefix each delimiter occurring inside a record with a backslash.
        null_terminated (bool): Split the input on NUL bytes instead of newlines.
    """

    delimiter: str = DEFAULT_DELIMITER
    strip: bool = False
    skip_empty: bool = False
    escape: bool = False
    null_terminated: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "WrapConfig":
        return cls(
            delimiter=args.delimiter,
            strip=args.strip,
            skip_empty=args.skip_empty,
            escape=args.escape,
            null_terminated=args.null,
        )

    def resolve(self) -> str:
        """
        Resolve the delimiter token. Raises `DelimiterError` for a malformed token.
        """
        return resolve_delimiter(self.delimiter)

    @property
    def delimiter_bytes(self) -> bytes:
        return encode_delimiter(self.resolve())

    @property
    def separator(self) -> bytes:
        return NUL if self.null_terminated else NEWLINE
