"""Shortest knight paths on an 8x8 chessboard."""

from knight_travails.formats import KnightPath, format_path, path_to_uci
from knight_travails.pathfinder import (
    KNIGHT_OFFSETS,
    SearchExhaustedError,
    find_path,
    is_knight_move,
    knight_distance,
)
from knight_travails.squares import Square, as_square

__all__ = [
    "KnightPath",
    "format_path",
    "path_to_uci",
    "KNIGHT_OFFSETS",
    "SearchExhaustedError",
    "find_path",
    "is_knight_move",
    "knight_distance",
    "Square",
    "as_square",
]
