"""Type definitions for terminal attribute decoding."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Self


class Field(StrEnum):
    """Identity of one field of the terminal attributes structure.

    The value doubles as the label printed in front of the decoded field.
    """

    IFLAG = "c_iflag"
    OFLAG = "c_oflag"
    CFLAG = "c_cflag"
    LFLAG = "c_lflag"
    CC = "c_cc"
    ISPEED = "c_ispeed"
    OSPEED = "c_ospeed"


@dataclass(frozen=True, slots=True)
class FlagEntry:
    """A symbolic name and the bit value it stands for."""

    name: str
    value: int


@dataclass(frozen=True, slots=True)
class FlagTable:
    """Named-bit table for one field.

    Entries are always kept sorted by name. Decoded output follows table
    order, so two runs against the same mask print identical text.
    """

    field: Field
    entries: tuple[FlagEntry, ...] = ()

    def __post_init__(self) -> None:
        entries = tuple(sorted(self.entries, key=lambda e: e.name))
        for prev, entry in zip(entries, entries[1:]):
            if prev.name == entry.name:
                raise ValueError(f"duplicate flag name {entry.name} in {self.field} table")
        object.__setattr__(self, "entries", entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __contains__(self, name: object) -> bool:
        return any(e.name == name for e in self.entries)

    def value_of(self, name: str) -> int:
        """Return the value registered under name."""
        for entry in self.entries:
            if entry.name == name:
                return entry.value
        raise KeyError(name)

    @classmethod
    def from_pairs(cls, field: Field, pairs: dict[str, int] | list[tuple[str, int]]) -> Self:
        items = pairs.items() if isinstance(pairs, dict) else pairs
        return cls(field, tuple(FlagEntry(name, value) for name, value in items))


@dataclass(frozen=True, slots=True)
class SpeedTable(FlagTable):
    """Table of mutually exclusive baud rate values.

    Several names may share a value (EXTA and B19200 on BSD). The first
    name in table order wins.
    """


@dataclass(frozen=True, slots=True)
class DecodedResult:
    """Symbolic decomposition of one raw mask.

    Renders as the pipe-joined tokens followed by the residual in hex.
    """

    tokens: tuple[str, ...] = ()
    residual: int | None = None

    def __str__(self) -> str:
        parts = list(self.tokens)
        if self.residual:
            parts.append(f"{self.residual:#x}")
        return "|".join(parts)


def _cc_byte(value: Any) -> int:
    # VMIN/VTIME come back as ints once ICANON is off, everything else as bytes
    if isinstance(value, int):
        return value & 0xFF
    return value[0] if value else 0


@dataclass(frozen=True)
class TerminalAttributes:
    """Snapshot of the terminal attributes structure of one descriptor."""

    iflag: int
    oflag: int
    cflag: int
    lflag: int
    ispeed: int
    ospeed: int
    cc: tuple[int, ...]

    @classmethod
    def from_tcgetattr(cls, attrs: list[Any]) -> Self:
        """Build from the 7-element list returned by termios.tcgetattr."""
        iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
        return cls(
            iflag=iflag,
            oflag=oflag,
            cflag=cflag,
            lflag=lflag,
            ispeed=ispeed,
            ospeed=ospeed,
            cc=tuple(_cc_byte(c) for c in cc),
        )

    def mask(self, field: Field) -> int:
        """Return the raw integer value stored for a mode or speed field."""
        return {
            Field.IFLAG: self.iflag,
            Field.OFLAG: self.oflag,
            Field.CFLAG: self.cflag,
            Field.LFLAG: self.lflag,
            Field.ISPEED: self.ispeed,
            Field.OSPEED: self.ospeed,
        }[field]
