"""Distance heuristics over device tiles."""
from abc import ABC, abstractmethod

from ..models.fabric import Tile


class HeuristicFunction(ABC):
    """Abstract base class for heuristic functions."""

    @abstractmethod
    def calculate(self, start: Tile, end: Tile) -> int:
        """Calculate heuristic cost between two tiles."""
        pass


class ManhattanHeuristic(HeuristicFunction):
    """Manhattan distance over tile rows and columns."""

    def calculate(self, start: Tile, end: Tile) -> int:
        return abs(start.column - end.column) + abs(start.row - end.row)


class ZeroHeuristic(HeuristicFunction):
    """Zero heuristic, turns A* into uniform-cost search."""

    def calculate(self, start: Tile, end: Tile) -> int:
        return 0
