"""Board coordinates for knight path finding."""

from collections.abc import Sequence
from dataclasses import dataclass

import chess

BOARD_SIZE = 8


@dataclass(frozen=True)
class Square:
    """A board position as (file, rank), both 0-based.

    Coordinates are not validated on construction so that off-board input can
    be represented and rejected by callers; use ``on_board`` to check.

    >>> Square(4, 3).name
    'e4'
    >>> Square(8, 0).on_board
    False
    """

    file: int
    rank: int

    @property
    def on_board(self) -> bool:
        return 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE

    @property
    def index(self) -> chess.Square:
        """Dense 0-63 key, identical to python-chess square numbering.

        >>> Square(0, 0).index, Square(7, 7).index, Square(4, 3).index == chess.E4
        (0, 63, True)
        """
        return self.file + BOARD_SIZE * self.rank

    @property
    def name(self) -> str:
        if not self.on_board:
            raise ValueError(f"Square {self} is off the board")
        return chess.square_name(self.index)

    @classmethod
    def from_index(cls, index: chess.Square) -> "Square":
        """
        >>> Square.from_index(chess.H8)
        Square(file=7, rank=7)
        """
        return cls(chess.square_file(index), chess.square_rank(index))

    @classmethod
    def parse(cls, text: str) -> "Square":
        """Parse a square in algebraic notation.

        >>> Square.parse('e4')
        Square(file=4, rank=3)
        >>> Square.parse(' H8 ')
        Square(file=7, rank=7)
        >>> Square.parse('i9')
        Traceback (most recent call last):
        ...
        ValueError: Invalid square: 'i9'
        """
        try:
            index = chess.parse_square(text.strip().lower())
        except ValueError as e:
            raise ValueError(f"Invalid square: {text!r}") from e
        return cls.from_index(index)

    def __str__(self) -> str:
        """
        >>> str(Square(4, 3)), str(Square(-1, 0))
        ('e4', '(-1, 0)')
        """
        return self.name if self.on_board else f"({self.file}, {self.rank})"

    def __add__(self, offset: tuple[int, int]) -> "Square":
        df, dr = offset
        return Square(self.file + df, self.rank + dr)

    def __sub__(self, other: "Square") -> tuple[int, int]:
        return (self.file - other.file, self.rank - other.rank)


def as_square(value: Square | Sequence[int]) -> Square:
    """Coerce a Square or a (file, rank) pair to a Square.

    >>> as_square((1, 2))
    Square(file=1, rank=2)
    >>> as_square(Square(0, 0))
    Square(file=0, rank=0)
    """
    if isinstance(value, Square):
        return value
    if isinstance(value, str) or len(value) != 2:
        raise TypeError(f"Expected a (file, rank) pair, got {value!r}")
    file, rank = value
    if not all(isinstance(c, int) and not isinstance(c, bool) for c in (file, rank)):
        raise TypeError(f"Expected integer coordinates, got {value!r}")
    return Square(file, rank)
