"""Alphabet definitions for radix encoding.

This module defines the `Alphabet` class and the fixed alphabets offered by
the codec registry. An alphabet is an ordered set of distinct single-character
symbols; the position of a symbol is its digit value.

Examples
--------
>>> from basexxx.alphabet import BASE16
>>> BASE16.size
16
>>> BASE16.log2_size
4.0
>>> BASE16.index_of("A")
10
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self
import math

from basexxx.errors import InvalidCharacterError


@dataclass(frozen=True)
class Alphabet:
    """An ordered, immutable symbol set defining a positional numeral system.

    Parameters
    ----------
    symbols:
        Ordered collection of single characters; index = digit value.
    name:
        Human-friendly name, e.g., "Base62".

    Notes
    -----
    The symbol-to-index table is built once in ``__post_init__`` and never
    mutated afterwards, so one instance can be shared between threads.
    """

    symbols: tuple[str, ...]
    name: str
    _index: dict[str, int] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        if len(self.symbols) < 2:
            raise ValueError(f"Alphabet {self.name!r} needs at least 2 symbols, got {len(self.symbols)}")
        index: dict[str, int] = {}
        for i, sym in enumerate(self.symbols):
            if len(sym) != 1:
                raise ValueError(f"Alphabet {self.name!r}: symbol {sym!r} is not a single character")
            if sym in index:
                raise ValueError(f"Alphabet {self.name!r}: duplicate symbol {sym!r} at {index[sym]} and {i}")
            index[sym] = i
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_string(cls, chars: str, name: str) -> Self:
        """Build an alphabet from a string of symbols."""

        return cls(symbols=tuple(chars), name=name)

    @property
    def size(self) -> int:
        """Number of symbols, i.e. the radix."""

        return len(self.symbols)

    @property
    def log2_size(self) -> float:
        """log2(size): bits of information carried by one symbol."""

        return math.log2(self.size)

    @property
    def zero(self) -> str:
        """The symbol with digit value 0."""

        return self.symbols[0]

    def is_valid_char(self, char: str) -> bool:
        """Return True if `char` is a member of the alphabet."""

        return char in self._index

    def index_of(self, char: str, position: int | None = None) -> int:
        """Return the digit value of ``char``.

        Raises `InvalidCharacterError` (with ``position`` attached) if the
        character is not in the alphabet.
        """

        try:
            return self._index[char]
        except KeyError:
            raise InvalidCharacterError(char, position, self.name) from None

    def to_indices(self, text: str, offset: int = 0) -> list[int]:
        """Map each character of ``text`` to its digit value.

        ``offset`` is added to the position reported for an invalid character.
        """

        if not text:
            return []
        return [self.index_of(ch, pos) for pos, ch in enumerate(text, start=offset)]

    def from_indices(self, indices: list[int]) -> str:
        """Inverse of `to_indices`: digit values -> text."""

        if not indices:
            return ""
        return "".join(self.symbols[i] for i in indices)


def generate_range(start: int, end: int) -> str:
    """Return the characters for code points ``start``..``end`` inclusive."""

    if start > end:
        raise ValueError(f"Empty code point range: {start:#x}..{end:#x}")
    return "".join(chr(cp) for cp in range(start, end + 1))


# Predefined alphabets
BASE10 = Alphabet.from_string("0123456789", "Base10")
BASE16 = Alphabet.from_string("0123456789ABCDEF", "Base16")
BASE26 = Alphabet.from_string("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "Base26")
BASE36 = Alphabet.from_string("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ", "Base36")
BASE52 = Alphabet.from_string(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz", "Base52"
)
BASE62 = Alphabet.from_string(
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz", "Base62"
)
# Printable ASCII "!" (0x21) through "~" (0x7E)
BASE94 = Alphabet.from_string(generate_range(0x21, 0x7E), "Base94")

# CJK alphabets, sorted by code point: U+3007 (ideographic zero) precedes
# the unified ideograph blocks.
CJK_1 = Alphabet.from_string("〇" + generate_range(0x4E00, 0x9FFF), "CJK-1")
CJK_2 = Alphabet.from_string(
    "〇" + generate_range(0x3400, 0x4DBF) + generate_range(0x4E00, 0x9FFF),
    "CJK-2",
)


def get_alphabet_by_name(name: str) -> Alphabet:
    """Return a predefined `Alphabet` by its `name`.

    Raises a `ValueError` with available options if the name is unknown.
    """

    registry: dict[str, Alphabet] = {
        a.name: a for a in (BASE10, BASE16, BASE26, BASE36, BASE52, BASE62, BASE94, CJK_1, CJK_2)
    }

    try:
        return registry[name]
    except KeyError as exc:
        options = ", ".join(sorted(registry.keys()))
        raise ValueError(f"Unknown alphabet name: {name!r}. Available: {options}") from exc
