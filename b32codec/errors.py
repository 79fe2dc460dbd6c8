"""Exceptions raised when Base32 text cannot be decoded."""


class DecodeError(ValueError):
    """Base class for all Base32 decode failures."""
    pass


class InvalidCharacterError(DecodeError):
    """Raised on a character outside the alphabet and its aliases."""

    def __init__(self, position: int, character: str) -> None:
        self.position = position
        self.character = character
        super().__init__(
            f"Invalid character {character!r} at position {position}")


class InvalidLengthError(DecodeError):
    """Raised when the symbol count or padding can't come from any encoding.

    Attributes:
        length: Number of symbols after trailing padding was stripped.
        padding: Number of trailing padding characters that were stripped.
    """

    def __init__(self, length: int, padding: int = 0) -> None:
        self.length = length
        self.padding = padding
        if padding:
            message = (f"Invalid length: {length} symbols followed by "
                       f"{padding} padding characters")
        else:
            message = f"Invalid length: {length} symbols"
        super().__init__(message)


class NonZeroPaddingBitsError(DecodeError):
    """Raised when the unused bits of the last symbol are not all zero."""

    def __init__(self, bits: int) -> None:
        self.bits = bits
        super().__init__(f"Trailing {bits} padding bit(s) are not zero")
