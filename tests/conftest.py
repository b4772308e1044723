"""Shared fixtures for knight path tests."""

import chess
import pytest


def _distances_from(origin: chess.Square) -> dict[chess.Square, int]:
    """Knight distances from origin, using python-chess attack tables."""
    distances = {origin: 0}
    layer = [origin]
    while layer:
        next_layer: list[chess.Square] = []
        for square in layer:
            for target in chess.SquareSet(chess.BB_KNIGHT_ATTACKS[square]):
                if target not in distances:
                    distances[target] = distances[square] + 1
                    next_layer.append(target)
        layer = next_layer
    return distances


@pytest.fixture(scope="session")
def knight_distances() -> dict[tuple[chess.Square, chess.Square], int]:
    """Minimum knight move counts for all 64x64 square pairs."""
    table: dict[tuple[chess.Square, chess.Square], int] = {}
    for origin in chess.SQUARES:
        for target, distance in _distances_from(origin).items():
            table[(origin, target)] = distance
    return table
