"""Application service for routing a design's nets one after another."""
import logging
from typing import Iterable, List, Optional

from ...algorithms.astar.astar_router import AStarRouter
from ...domain.models.fabric import Net
from ...domain.models.routing import NetRoutingResult, RoutingStatistics
from ...domain.services.route_metrics import compute_route_metrics
from ...shared.configuration import get_config
from ...shared.configuration.settings import RouterSettings
from ...shared.exceptions import RoutingError
from ...shared.utils.performance_utils import memory_usage_mb, timing_context

logger = logging.getLogger(__name__)


class RoutingOrchestrator:
    """Routes nets sequentially with a single :class:`AStarRouter`.

    Nets never share routing state; each gets a fresh route tree. When
    ``settings.skip_failed_nets`` is set a net that fails with a
    :class:`RoutingError` is recorded and the pass continues, otherwise the
    error aborts the pass. Route tree contract violations always propagate.

    Without explicit settings the router settings of the global
    configuration (:func:`get_config`) apply.
    """

    def __init__(self, router: Optional[AStarRouter] = None,
                 settings: Optional[RouterSettings] = None):
        if settings is None:
            settings = router.settings if router else get_config().get_settings().router
        self.settings = settings
        self.router = router or AStarRouter(self.settings)
        self.results: List[NetRoutingResult] = []
        self.cancelled = False

    def route_net(self, net: Net) -> NetRoutingResult:
        """Route a single net and wrap the outcome.

        Raises:
            RoutingError: Only when ``settings.skip_failed_nets`` is off.
        """
        try:
            with timing_context(f"Routing net {net.name}") as timing:
                tree = self.router.route_net(net)
        except RoutingError as e:
            if not self.settings.skip_failed_nets:
                logger.error(f"Routing aborted on net {net.name}: {e}")
                raise
            logger.warning(f"Failed to route net {net.name}: {e}")
            return NetRoutingResult.failure_result(net.name, str(e), timing['elapsed'])

        return NetRoutingResult.success_result(
            net.name, tree, compute_route_metrics(tree), timing['elapsed'])

    def route_all_nets(self, nets: Iterable[Net]) -> RoutingStatistics:
        """Route every net in order and return session statistics.

        Per-net results are kept in :attr:`results`.
        """
        nets = list(nets)
        self.results = []
        self.cancelled = False
        statistics = RoutingStatistics()
        peak_memory = memory_usage_mb()

        logger.info(f"Starting to route {len(nets)} nets")

        for i, net in enumerate(nets):
            if self.cancelled:
                logger.info("Routing cancelled")
                break

            result = self.route_net(net)
            self.results.append(result)
            statistics.record(result)
            peak_memory = max(peak_memory, memory_usage_mb())

            if (i + 1) % self.settings.progress_interval == 0:
                logger.info(f"Progress: {i + 1}/{len(nets)} nets processed")

        statistics.memory_peak = peak_memory
        logger.info(f"Routing completed: {statistics.nets_routed}/{len(nets)} nets "
                    f"({statistics.success_rate:.1%} success rate)")
        return statistics

    def cancel_routing(self) -> None:
        """Stop before the next net of the running pass."""
        self.cancelled = True
        logger.info("Routing cancellation requested")

    def get_result(self, net_name: str) -> Optional[NetRoutingResult]:
        for result in self.results:
            if result.net_name == net_name:
                return result
        return None
