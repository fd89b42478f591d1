class WraplineError(Exception):
    """Base class for errors raised by wrapline."""


class DelimiterError(WraplineError, ValueError):
    """
    Raised when a delimiter token cannot be turned into a delimiter.

    Attributes:
        token (str): The token given by the user.
    """

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class InvalidDelimiterSyntax(DelimiterError):
    """The token has the `0x` prefix but the rest is not a hexadecimal number."""


class DelimiterOutOfRange(DelimiterError):
    """The hexadecimal value is outside the Unicode code point range."""
