"""Domain models for routing results."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .fabric import Connection
from .route_tree import RouteTree


@dataclass(frozen=True)
class RouteMetrics:
    """Value object summarizing the shape of one route tree."""
    node_count: int = 0
    pip_count: int = 0
    leaf_count: int = 0
    depth: int = 0                  # Longest root-to-leaf path, in edges
    wirelength: int = 0             # Sum of tile Manhattan distances over all edges
    bounding_box: Tuple[int, int, int, int] = (0, 0, 0, 0)  # min_row, min_col, max_row, max_col

    def to_dict(self) -> Dict[str, Any]:
        return {
            'node_count': self.node_count,
            'pip_count': self.pip_count,
            'leaf_count': self.leaf_count,
            'depth': self.depth,
            'wirelength': self.wirelength,
            'bounding_box': list(self.bounding_box),
        }


@dataclass
class NetRoutingResult:
    """Value object representing the outcome of routing one net."""
    net_name: str
    success: bool
    route: Optional[RouteTree] = None
    pips: List[Connection] = field(default_factory=list)
    metrics: Optional[RouteMetrics] = None
    error_message: Optional[str] = None
    execution_time: float = 0.0

    @classmethod
    def success_result(cls, net_name: str, route: RouteTree, metrics: RouteMetrics,
                       execution_time: float = 0.0) -> 'NetRoutingResult':
        """Create a successful routing result."""
        return cls(
            net_name=net_name,
            success=True,
            route=route,
            pips=route.get_all_pips(),
            metrics=metrics,
            execution_time=execution_time
        )

    @classmethod
    def failure_result(cls, net_name: str, error_message: str,
                       execution_time: float = 0.0) -> 'NetRoutingResult':
        """Create a failed routing result."""
        return cls(
            net_name=net_name,
            success=False,
            error_message=error_message,
            execution_time=execution_time
        )


@dataclass
class RoutingStatistics:
    """Value object containing routing session statistics."""
    nets_attempted: int = 0
    nets_routed: int = 0
    nets_failed: int = 0
    total_pips: int = 0
    total_wirelength: int = 0
    total_time: float = 0.0
    memory_peak: float = 0.0
    failed_nets: List[str] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        """Calculate routing success rate."""
        if self.nets_attempted == 0:
            return 0.0
        return self.nets_routed / self.nets_attempted

    @property
    def average_pips_per_net(self) -> float:
        if self.nets_routed == 0:
            return 0.0
        return self.total_pips / self.nets_routed

    def record(self, result: NetRoutingResult) -> None:
        """Fold one net result into the totals."""
        self.nets_attempted += 1
        self.total_time += result.execution_time
        if result.success:
            self.nets_routed += 1
            self.total_pips += len(result.pips)
            if result.metrics:
                self.total_wirelength += result.metrics.wirelength
        else:
            self.nets_failed += 1
            self.failed_nets.append(result.net_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nets_attempted': self.nets_attempted,
            'nets_routed': self.nets_routed,
            'nets_failed': self.nets_failed,
            'success_rate': self.success_rate,
            'total_pips': self.total_pips,
            'average_pips_per_net': self.average_pips_per_net,
            'total_wirelength': self.total_wirelength,
            'total_time_seconds': self.total_time,
            'memory_peak_mb': self.memory_peak,
            'failed_nets': list(self.failed_nets),
        }
