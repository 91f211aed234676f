"""Domain models."""
from .fabric import Tile, Wire, Connection, SitePin, BelPin, Net
from .route_tree import RouteTree
from .routing import RouteMetrics, NetRoutingResult, RoutingStatistics

__all__ = [
    'Tile', 'Wire', 'Connection', 'SitePin', 'BelPin', 'Net',
    'RouteTree',
    'RouteMetrics', 'NetRoutingResult', 'RoutingStatistics'
]
