"""Errors raised while converting readable size strings to byte counts.

Every failure is a ``ValueError`` subclass carrying the offending text in
``value``. Messages follow the form::

    Invalid expression for function fromReadableSize - <reason> ("<value>")
"""

from readable_size.config import FUNCTION_NAME


class ReadableSizeError(ValueError):
    """Base class for all readable size parse failures."""
    reason = "Unable to parse readable size"

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f'Invalid expression for function {FUNCTION_NAME} - {self.reason} ("{value}")'
        )


class LeadingWhitespaceError(ReadableSizeError):
    reason = "Leading whitespace is not allowed"


class InvalidNumericComponentError(ReadableSizeError):
    reason = "Unable to parse readable size numeric component"


class TrailingCharactersError(ReadableSizeError):
    reason = "Found trailing characters after readable size string"


class UnknownUnitError(ReadableSizeError):
    reason = "Unknown readable size unit"


class NegativeSizeError(ReadableSizeError):
    reason = "Readable size must not be negative"


class ResultTooLargeError(ReadableSizeError):
    reason = "Result is too big for output type (UInt64)"
