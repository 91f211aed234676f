"""Priority frontier for the route tree A* search."""
import heapq
import itertools
from typing import List, Optional, Tuple

from ...domain.models.fabric import Tile
from ...domain.models.route_tree import RouteTree
from ...domain.services.pathfinder import HeuristicFunction, ManhattanHeuristic


class RouteFrontier:
    """Min-heap of route tree nodes for one sink search.

    cost = node.data (hops from the source)
         + distance from the node's tile to the target tile
         + distance from the node's tile to the start tile

    The second distance keeps the search close to the net's source. The sum
    is not an admissible A* heuristic, so routes are short but not
    guaranteed shortest. Equal costs pop in insertion order.
    """

    def __init__(self, target_tile: Tile, start_tile: Tile,
                 heuristic: Optional[HeuristicFunction] = None):
        self.target_tile = target_tile
        self.start_tile = start_tile
        self.heuristic = heuristic or ManhattanHeuristic()
        self._heap: List[Tuple[int, int, RouteTree]] = []
        self._sequence = itertools.count()

    @classmethod
    def from_tree(cls, root: RouteTree, target_tile: Tile, start_tile: Tile,
                  heuristic: Optional[HeuristicFunction] = None) -> 'RouteFrontier':
        """Queue every node of ``root``'s tree, costed against a new target."""
        frontier = cls(target_tile, start_tile, heuristic)
        for tree in root.preorder():
            frontier.push(tree)
        return frontier

    def cost(self, tree: RouteTree) -> int:
        tile = tree.wire.tile
        return (tree.data
                + self.heuristic.calculate(tile, self.target_tile)
                + self.heuristic.calculate(tile, self.start_tile))

    def push(self, tree: RouteTree) -> None:
        heapq.heappush(self._heap, (self.cost(tree), next(self._sequence), tree))

    def pop(self) -> RouteTree:
        """Remove and return the cheapest node. Raises IndexError when empty."""
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
