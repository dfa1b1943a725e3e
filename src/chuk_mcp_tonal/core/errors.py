"""
Tonal errors.

Every failure raised by the tonal core derives from TonalError, which is a
ValueError so callers that only care about "bad value" can catch that.
"""


class TonalError(ValueError):
    """Base class for tonal failures."""


class OutOfRangeError(TonalError):
    """A field lies outside its declared domain."""


class InvalidCombinationError(TonalError):
    """Fields are individually in range but meaningless together."""


class UnrepresentableError(TonalError):
    """A valid computation produced a result that cannot be represented."""


class MissingOperandError(TonalError):
    """A required operand was not supplied."""


class TonalParseError(TonalError):
    """Text could not be parsed as a pitch or interval."""
