"""A* single-net routing over a route tree."""
from .astar_router import AStarRouter
from .frontier import RouteFrontier

__all__ = ['AStarRouter', 'RouteFrontier']
