"""Base32 alphabet tables.

An Alphabet is plain data: the 32 symbols in index order, the padding
character (or None), and the extra characters accepted while decoding.
The predefined alphabets are module level constants:

    CROCKFORD_BASE32          0-9 A-Z without I L O U, padded with '='
    RFC4648_BASE32            A-Z 2-7, padded with '='
    UNPADDED_RFC4648_BASE32   A-Z 2-7, never padded
    UNPADDED_CROCKFORD_BASE32 Crockford symbols, never padded

Crockford decoding is case-insensitive and folds the look-alikes
O -> 0 and I, L -> 1. The RFC 4648 tables accept only their exact symbols.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

BASE32_SYMBOL_COUNT = 32

RFC4648_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
CROCKFORD_SYMBOLS = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
CROCKFORD_ALIASES = (("O", "0"), ("I", "1"), ("L", "1"))


@dataclass(frozen=True)
class Alphabet:
    """Symbol table plus the decode rules that go with it.

    Attributes:
        name: Short identifier used in logs and reprs.
        symbols: The 32 output symbols, index i encodes the 5-bit value i.
        padding: Padding character, or None for an unpadded alphabet.
        aliases: (alias, symbol) pairs accepted on decode as that symbol.
        case_insensitive: If True, lowercase input decodes like uppercase.
    """
    name: str
    symbols: str
    padding: Optional[str] = "="
    aliases: Tuple[Tuple[str, str], ...] = ()
    case_insensitive: bool = False
    decode_map: Mapping[str, int] = field(
        init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        if len(self.symbols) != BASE32_SYMBOL_COUNT:
            raise ValueError(
                f"Alphabet {self.name!r} needs {BASE32_SYMBOL_COUNT} symbols, "
                f"got {len(self.symbols)}")

        table = {}
        for value, symbol in enumerate(self.symbols):
            for char in self._variants(symbol):
                if char in table:
                    raise ValueError(
                        f"Alphabet {self.name!r} repeats symbol {symbol!r}")
                table[char] = value

        for alias, symbol in self.aliases:
            if symbol not in self.symbols:
                raise ValueError(
                    f"Alias {alias!r} of alphabet {self.name!r} points at "
                    f"unknown symbol {symbol!r}")
            for char in self._variants(alias):
                if char in table and table[char] != self.symbols.index(symbol):
                    raise ValueError(
                        f"Alias {alias!r} of alphabet {self.name!r} collides "
                        f"with an existing symbol")
                table[char] = self.symbols.index(symbol)

        if self.padding is not None:
            if len(self.padding) != 1:
                raise ValueError(
                    f"Padding of alphabet {self.name!r} must be a single "
                    f"character, got {self.padding!r}")
            if self.padding in table:
                raise ValueError(
                    f"Padding {self.padding!r} of alphabet {self.name!r} "
                    f"is also a symbol")

        # Frozen dataclass, so the derived table goes in through object.
        object.__setattr__(self, "decode_map", MappingProxyType(table))

    def _variants(self, char: str) -> Tuple[str, ...]:
        """Characters that decode as `char` under this alphabet's case rule."""
        if self.case_insensitive and char.lower() != char.upper():
            return (char.upper(), char.lower())
        return (char,)

    @property
    def padded(self) -> bool:
        """True if encode emits padding up to a multiple of 8 characters."""
        return self.padding is not None

    def value_of(self, char: str) -> Optional[int]:
        """Return the 5-bit value of `char`, or None if it isn't accepted."""
        return self.decode_map.get(char)


CROCKFORD_BASE32 = Alphabet(
    name="crockford",
    symbols=CROCKFORD_SYMBOLS,
    padding="=",
    aliases=CROCKFORD_ALIASES,
    case_insensitive=True,
)

RFC4648_BASE32 = Alphabet(
    name="rfc4648",
    symbols=RFC4648_SYMBOLS,
    padding="=",
)

UNPADDED_RFC4648_BASE32 = Alphabet(
    name="unpadded-rfc4648",
    symbols=RFC4648_SYMBOLS,
    padding=None,
)

UNPADDED_CROCKFORD_BASE32 = Alphabet(
    name="unpadded-crockford",
    symbols=CROCKFORD_SYMBOLS,
    padding=None,
    aliases=CROCKFORD_ALIASES,
    case_insensitive=True,
)


class Base32Type(Enum):
    """The predefined alphabets, selectable by name."""

    CROCKFORD = "crockford"
    RFC4648 = "rfc4648"
    UNPADDED_RFC4648 = "unpadded-rfc4648"
    UNPADDED_CROCKFORD = "unpadded-crockford"

    @property
    def alphabet(self) -> Alphabet:
        return _ALPHABETS[self]

    @classmethod
    def from_name(cls, name: str) -> "Base32Type":
        """Look up a Base32Type by name, ignoring case and '-' vs '_'.

        Raises:
            ValueError: If no predefined alphabet has that name.
        """
        key = name.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == key:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown Base32 alphabet {name!r}. Valid: {valid}")


_ALPHABETS = {
    Base32Type.CROCKFORD: CROCKFORD_BASE32,
    Base32Type.RFC4648: RFC4648_BASE32,
    Base32Type.UNPADDED_RFC4648: UNPADDED_RFC4648_BASE32,
    Base32Type.UNPADDED_CROCKFORD: UNPADDED_CROCKFORD_BASE32,
}
