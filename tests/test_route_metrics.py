"""Tests for route shape metrics."""
from fpgaroute.algorithms.astar import AStarRouter
from fpgaroute.domain.models.route_tree import RouteTree
from fpgaroute.domain.models.routing import RouteMetrics
from fpgaroute.domain.services import compute_route_metrics


class TestComputeRouteMetrics:

    def test_single_node(self, linear_fabric):
        metrics = compute_route_metrics(RouteTree(linear_fabric.s))
        assert metrics == RouteMetrics(node_count=1, pip_count=0, leaf_count=1, depth=0,
                                       wirelength=0, bounding_box=(0, 0, 0, 0))

    def test_linear_route(self, linear_fabric):
        metrics = compute_route_metrics(AStarRouter().route_net(linear_fabric.net))

        assert metrics.node_count == 3
        assert metrics.pip_count == 2
        assert metrics.leaf_count == 1
        assert metrics.depth == 2
        assert metrics.wirelength == 2
        assert metrics.bounding_box == (0, 0, 0, 2)

    def test_branching_route(self, shared_path_fabric):
        metrics = compute_route_metrics(AStarRouter().route_net(shared_path_fabric.net))

        assert metrics.node_count == 5
        assert metrics.pip_count == 4
        assert metrics.leaf_count == 2
        assert metrics.depth == 3
        assert metrics.wirelength == 4
        assert metrics.bounding_box == (0, 0, 1, 3)

    def test_fixed_connections_are_not_pips(self, grid_net):
        route = AStarRouter().route_net(grid_net)
        metrics = compute_route_metrics(route)

        assert metrics.pip_count == len(route.get_all_pips())
        # every sink is entered through one fixed IMUX -> IN connection
        assert metrics.node_count - 1 - metrics.pip_count == 3

    def test_grid_route_stays_in_device(self, grid_net):
        metrics = compute_route_metrics(AStarRouter().route_net(grid_net))
        min_row, min_col, max_row, max_col = metrics.bounding_box
        assert (min_row, min_col) == (0, 0)
        assert max_row == 4
        assert 3 <= max_col <= 4
        # half perimeter of the sinks' bounding box
        assert metrics.wirelength >= 7

    def test_to_dict(self, linear_fabric):
        data = compute_route_metrics(AStarRouter().route_net(linear_fabric.net)).to_dict()
        assert data['node_count'] == 3
        assert data['bounding_box'] == [0, 0, 0, 2]
