"""Abstract base class for codecs."""

from abc import ABC, abstractmethod


class Codec(ABC):
    """Base codec interface for turning bytes into text and back."""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode a byte buffer.

        Args:
            data: The bytes to encode

        Returns:
            The encoded text
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode text produced by encode().

        Args:
            text: The text to decode

        Returns:
            The decoded bytes
        """
        pass
