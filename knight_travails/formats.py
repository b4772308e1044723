"""Rendering knight paths as square names, UCI moves and board positions."""

from collections.abc import Sequence

import chess
from pydantic import BaseModel, computed_field

from knight_travails.pathfinder import find_path
from knight_travails.squares import Square, as_square


def path_to_names(path: Sequence[Square]) -> list[str]:
    """
    >>> path_to_names([Square(0, 0), Square(1, 2)])
    ['a1', 'b3']
    """
    return [square.name for square in path]


def path_to_uci(path: Sequence[Square]) -> list[str]:
    """Convert a path to UCI moves, one per consecutive pair of squares.

    >>> path_to_uci([Square(0, 0), Square(1, 2), Square(2, 4)])
    ['a1b3', 'b3c5']
    >>> path_to_uci([Square(3, 3)])
    []
    """
    return [a.name + b.name for a, b in zip(path, path[1:])]


def format_path(path: Sequence[Square]) -> str:
    """
    >>> format_path([Square(0, 0), Square(2, 1)])
    'a1 -> c2'
    """
    return " -> ".join(path_to_names(path))


def path_to_fen(path: Sequence[Square]) -> str:
    """FEN of an empty board with a white knight on the path's first square.

    >>> path_to_fen([Square(0, 0), Square(1, 2)])
    '8/8/8/8/8/8/8/N7 w - - 0 1'
    """
    board = chess.Board.empty()
    board.set_piece_at(path[0].index, chess.Piece(chess.KNIGHT, chess.WHITE))
    return board.fen()


def fen_to_editor_url(fen: str) -> str:
    """Convert FEN to Lichess editor URL.

    >>> fen_to_editor_url("8/8/8/8/8/8/8/N7 w - - 0 1")
    'https://lichess.org/editor/8/8/8/8/8/8/8/N7_w_-_-_0_1'
    """
    return f"https://lichess.org/editor/{fen.replace(' ', '_')}"


class KnightPath(BaseModel):
    start: Square
    end: Square
    squares: list[Square]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def num_moves(self) -> int:
        return len(self.squares) - 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def uci_moves(self) -> list[str]:
        return path_to_uci(self.squares)

    @classmethod
    def solve(cls, start: Square | Sequence[int], end: Square | Sequence[int]) -> "KnightPath | None":
        """Find a shortest path and wrap it, None if either square is off the board.

        >>> KnightPath.solve((0, 0), (2, 1)).uci_moves
        ['a1c2']
        >>> KnightPath.solve((0, 0), (0, 8)) is None
        True
        """
        start = as_square(start)
        end = as_square(end)
        squares = find_path(start, end)
        if squares is None:
            return None
        return cls(start=start, end=end, squares=squares)

    def format_as_text(self) -> str:
        lines: list[str] = []
        lines.append(f"Knight path {self.start.name} -> {self.end.name}: {self.num_moves} moves")
        lines.append(f"  Squares: {format_path(self.squares)}")
        if self.uci_moves:
            lines.append(f"  Moves: {' '.join(self.uci_moves)}")
        lines.append(f"  Board: {fen_to_editor_url(path_to_fen(self.squares))}")
        return "\n".join(lines)
