"""
fpgaroute - A* routing of nets across an FPGA interconnect fabric
"""

__version__ = "1.0.0"
__license__ = "MIT"
__description__ = "Route-tree based A* router for programmable interconnect fabrics"

from .domain.models.route_tree import RouteTree
from .domain.models.routing import NetRoutingResult, RouteMetrics, RoutingStatistics
from .algorithms.astar.astar_router import AStarRouter
from .application.services.routing_orchestrator import RoutingOrchestrator
from .infrastructure.fabric.memory_fabric import InMemoryFabric
from .shared.exceptions import (
    FpgaRouteException, RouteTreeError, AlreadyRoutedError, ConnectionMismatchError,
    InvalidNetError, RoutingExhaustedError
)

__all__ = [
    'RouteTree', 'NetRoutingResult', 'RouteMetrics', 'RoutingStatistics',
    'AStarRouter', 'RoutingOrchestrator', 'InMemoryFabric',
    'FpgaRouteException', 'RouteTreeError', 'AlreadyRoutedError',
    'ConnectionMismatchError', 'InvalidNetError', 'RoutingExhaustedError'
]
