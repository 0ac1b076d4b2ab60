"""Square coordinate value type.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Coord:
    """One of the 64 squares, as a ``(file, rank)`` pair of indices 0–7."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise ValueError(f"Square out of range: file={self.file}, rank={self.rank}")

    @classmethod
    def parse(cls, name: str) -> Coord:
        """Parse square name, e.g. ``'e4'``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    @classmethod
    def from_index(cls, index: int) -> Coord:
        """Square from its 0–63 index."""
        if not 0 <= index < 64:
            raise ValueError(f"Invalid square index: {index}")
        return cls(index & 7, index >> 3)

    @property
    def index(self) -> int:
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        return _FILES[self.file] + _RANKS[self.rank]

    def with_file(self, file: int) -> Coord:
        """Same rank, different file."""
        return Coord(file, self.rank)

    def __str__(self) -> str:
        return self.name


def all_coords() -> list[Coord]:
    """All 64 squares, a1 first."""
    return [Coord.from_index(i) for i in range(64)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Coord(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coord(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coord(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coord(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coord(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coord(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coord(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Coord(f, 7) for f in range(8))
