import logging

from wrapline.core.errors import DelimiterOutOfRange, InvalidDelimiterSyntax

logger = logging.getLogger(__name__)

HEX_PREFIX = "0x"
MAX_CODE_POINT = 0x10FFFF
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def resolve_delimiter(token: str) -> str:
    """
    Convert a delimiter token to the delimiter string.

    A token starting with `0x` is read as the hexadecimal value of a single
    code point. Any other token is used as it is.

    >>> resolve_delimiter("0x27")
    "'"
    >>> resolve_delimiter("[]")
    '[]'

    Raises:
        InvalidDelimiterSyntax: The part after `0x` is not hexadecimal.
        DelimiterOutOfRange: The value is greater than 0x10FFFF.
    """
    if not token.startswith(HEX_PREFIX):
        return token

    digits = token[len(HEX_PREFIX) :]
    # int() alone would also accept signs, underscores and surrounding spaces
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise InvalidDelimiterSyntax(token, f"invalid hex value '{token}'")
    value = int(digits, 16)
    if value > MAX_CODE_POINT:
        raise DelimiterOutOfRange(token, f"hex value '{token}' out of valid Unicode range")

    logger.debug(f"Resolved delimiter token {token!r} to U+{value:04X}")
    return chr(value)


def encode_delimiter(delimiter: str) -> bytes:
    """
    Bytes written around each record.
    Surrogate code points have no UTF-8 form and are written as U+FFFD.

    >>> encode_delimiter("\\u00bb")
    b'\\xc2\\xbb'
    """
    return "".join("\ufffd" if 0xD800 <= ord(c) <= 0xDFFF else c for c in delimiter).encode(
        "utf-8"
    )
