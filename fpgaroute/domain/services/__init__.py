"""Domain services."""
from .pathfinder import HeuristicFunction, ManhattanHeuristic, ZeroHeuristic
from .route_metrics import compute_route_metrics

__all__ = ['HeuristicFunction', 'ManhattanHeuristic', 'ZeroHeuristic', 'compute_route_metrics']
