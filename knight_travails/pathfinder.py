"""Breadth-first shortest path search for a knight on an 8x8 board.

The search expands the board one level at a time from the start square. Each
discovered square becomes a SearchNode pointing back, by index, to the node it
was reached from; once the end square is first discovered the predecessor
chain is walked back to the start and reversed.

Offsets are always tried in the same order, so among several shortest paths
the one returned is stable across calls.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from knight_travails.logging_config import setup_logging
from knight_travails.squares import BOARD_SIZE, Square, as_square

logger = setup_logging(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)


class SearchExhaustedError(RuntimeError):
    """Raised when the frontier empties before reaching the end square.

    Every on-board square is reachable by a knight, so this only happens if the
    move table or the visited bookkeeping is broken.
    """

    def __init__(self, start: Square, end: Square):
        self.start = start
        self.end = end
        super().__init__(f"End position {end} could not be reached from {start}")


@dataclass(frozen=True)
class SearchNode:
    """A square discovered during the search.

    ``source`` is the position of the predecessor in the search's node list,
    None for the start node.
    """

    square: Square
    source: int | None = None


def _trace_back(nodes: list[SearchNode], index: int) -> list[Square]:
    path: list[Square] = []
    current: int | None = index
    while current is not None:
        node = nodes[current]
        path.append(node.square)
        current = node.source
    path.reverse()
    return path


def find_path(start: Square | Sequence[int], end: Square | Sequence[int]) -> list[Square] | None:
    """Find one shortest knight path from start to end, both inclusive.

    Squares may be given as Square or as (file, rank) pairs. Returns None when
    either square is off the board.

    >>> [s.name for s in find_path((0, 0), (1, 2))]
    ['a1', 'b3']
    >>> [s.name for s in find_path(Square.parse('a1'), Square.parse('h8'))]
    ['a1', 'c2', 'e3', 'g4', 'e5', 'g6', 'h8']
    >>> find_path((3, 3), (3, 3))
    [Square(file=3, rank=3)]
    >>> find_path((0, 0), (8, 0)) is None
    True

    Raises:
        SearchExhaustedError: If the search runs out of squares without
            reaching ``end``, which cannot happen with the knight's moves.
    """
    start = as_square(start)
    end = as_square(end)

    if not start.on_board or not end.on_board:
        return None

    if start == end:
        return [start]

    return _search(start, end, KNIGHT_OFFSETS)


def _search(start: Square, end: Square, offsets: Sequence[tuple[int, int]]) -> list[Square]:
    """Level-by-level search from start to end over the given move offsets."""
    nodes: list[SearchNode] = [SearchNode(start)]
    visited = [False] * (BOARD_SIZE * BOARD_SIZE)
    visited[start.index] = True

    frontier = [0]
    depth = 0
    while frontier:
        depth += 1
        next_frontier: list[int] = []

        for node_index in frontier:
            position = nodes[node_index].square

            for offset in offsets:
                candidate = position + offset
                if not candidate.on_board or visited[candidate.index]:
                    continue

                nodes.append(SearchNode(candidate, source=node_index))
                visited[candidate.index] = True

                if candidate == end:
                    logger.debug(f"Reached {end.name} from {start.name} in {depth} moves ({len(nodes)} nodes)")
                    return _trace_back(nodes, len(nodes) - 1)

                next_frontier.append(len(nodes) - 1)

        frontier = next_frontier

    logger.error(f"Search from {start.name} exhausted after {depth} levels without reaching {end.name}")
    raise SearchExhaustedError(start, end)


def knight_distance(start: Square | Sequence[int], end: Square | Sequence[int]) -> int | None:
    """Minimum number of knight moves between two squares, None if off the board.

    >>> knight_distance((0, 0), (7, 7))
    6
    >>> knight_distance((0, 0), (7, 0))
    5
    >>> knight_distance((-1, 0), (3, 3)) is None
    True
    """
    path = find_path(start, end)
    return len(path) - 1 if path is not None else None


def is_knight_move(a: Square | Sequence[int], b: Square | Sequence[int]) -> bool:
    """
    >>> is_knight_move((0, 0), (2, 1))
    True
    >>> is_knight_move((0, 0), (2, 2))
    False
    """
    return as_square(b) - as_square(a) in KNIGHT_OFFSETS
