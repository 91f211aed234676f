"""A* router for a single net over an interconnect fabric.

The route grows one sink at a time from the net's source wire. Before each
sink search every node already in the tree is re-queued with costs for the
new target, so later sinks can branch off anywhere on earlier routes. Once
a sink is reached the tree is pruned back to the paths that lead to the
sinks routed so far.
"""
from typing import Dict, List, Optional, Set

from ...domain.models.fabric import Connection, Net, SitePin, Wire
from ...domain.models.route_tree import RouteTree
from ...domain.services.pathfinder import HeuristicFunction, ManhattanHeuristic
from ...shared.configuration.settings import RouterSettings
from ...shared.exceptions import (
    InvalidNetError, NetRoutingError, RoutingExhaustedError, ValidationError
)
from ...shared.utils.logging_utils import ContextLogger, get_context_logger
from .frontier import RouteFrontier


class AStarRouter:
    """Routes one net at a time into a :class:`RouteTree`.

    Node payloads (``RouteTree.data``) hold the number of connections from
    the source. A router keeps no state between nets and can be reused.
    """

    def __init__(self, settings: Optional[RouterSettings] = None,
                 heuristic: Optional[HeuristicFunction] = None):
        self.settings = settings or RouterSettings()
        self.heuristic = heuristic or ManhattanHeuristic()
        self.last_expansions = 0

    def route_net(self, net: Net) -> RouteTree:
        """Route ``net`` from its source pin to every input pin.

        Returns:
            The route tree, rooted at the source pin's external wire. Every
            leaf ends at a sink pin.

        Raises:
            InvalidNetError: The net has no source pin or no input pins.
            RoutingExhaustedError: A sink could not be reached within
                ``settings.max_expansions`` frontier pops.
            NetRoutingError: A sink's pin wire cannot be reached from its
                target wire.
        """
        log = get_context_logger(__name__, net=net.name)

        source_pin = net.get_source_site_pin()
        if source_pin is None:
            raise InvalidNetError(f"Net {net.name} has no source site pin",
                                  net_id=net.name, reason="no_source")

        sinks = self.get_sinks_to_route(net)
        if not sinks:
            raise InvalidNetError(f"Net {net.name} has no sink site pins to route",
                                  net_id=net.name, reason="no_sinks")

        start = RouteTree(source_pin.external_wire)
        start.data = 0
        terminals: Set[RouteTree] = set()
        self.last_expansions = 0

        log.debug(f"Routing {len(sinks)} sinks from {start.wire.full_name}")
        for sink in sinks:
            target_wire = self.get_target_sink_wire(sink)
            terminal = self._route_sink(start, sink, target_wire, net.name, log)
            terminals.add(terminal)
            start.prune(terminals)

        log.info(f"Routed {len(sinks)} sinks with {len(start.get_all_pips())} PIPs "
                 f"after {self.last_expansions} expansions")
        return start

    def get_sinks_to_route(self, net: Net) -> List[SitePin]:
        """Input site pins of ``net``, in net order."""
        return [pin for pin in net.get_site_pins() if pin.is_input]

    def get_target_sink_wire(self, pin: SitePin) -> Wire:
        """Wire the search aims for when routing to ``pin``.

        Starting at the pin's external wire, step back through reverse
        connections while a wire has exactly one driver and that driver
        fans out nowhere else. The result is usually a switchbox wire, which
        is cheaper to search for than the pin wire itself.
        """
        if not pin.is_input:
            raise ValidationError(f"Can only find sink wires for input site pins, got {pin.name}",
                                  field="pin", value=pin)

        sink_wire = pin.external_wire
        seen = {sink_wire}
        while True:
            reverse = list(sink_wire.get_reverse_wire_connections())
            if len(reverse) != 1:
                break
            previous = reverse[0].sink_wire
            if len(previous.get_wire_connections()) > 1 or previous in seen:
                break
            seen.add(previous)
            sink_wire = previous
        return sink_wire

    def finalize_route(self, route: RouteTree, sink: Optional[SitePin] = None,
                       net_id: Optional[str] = None) -> RouteTree:
        """Extend ``route`` from the target wire up to the sink pin.

        Follows the single forward connection of each wire until the pin's
        external wire is reached. Without ``sink`` the walk stops at the
        first wire with a site pin or bel pin connection. Nodes already in
        the tree along the way are reused.

        Returns:
            The node on the pin wire; this is the terminal for the sink.

        Raises:
            NetRoutingError: The walk branches, loops, or ends before the
                pin wire (reason ``dead_end``).
        """
        visited = {route.wire}
        while not self._reached_pin(route.wire, sink):
            connections = list(route.wire.get_wire_connections())
            if len(connections) != 1:
                pin_name = sink.name if sink is not None else "a pin"
                raise NetRoutingError(
                    f"Cannot extend route past {route.wire.full_name} to {pin_name}: "
                    f"{len(connections)} forward connections",
                    net_id=net_id, reason="dead_end")

            route = self._extend(route, connections[0])
            if route.wire in visited:
                raise NetRoutingError(
                    f"Route loops back to {route.wire.full_name} without reaching a pin",
                    net_id=net_id, reason="dead_end")
            visited.add(route.wire)
        return route

    @staticmethod
    def _reached_pin(wire: Wire, sink: Optional[SitePin]) -> bool:
        if sink is not None:
            return wire is sink.external_wire
        return bool(wire.get_pin_connections()) or bool(wire.get_terminals())

    @staticmethod
    def _extend(parent: RouteTree, connection: Connection) -> RouteTree:
        """Child of ``parent`` on ``connection.sink_wire``, created if missing."""
        for child in parent.sink_trees:
            if child.wire is connection.sink_wire:
                return child
        child = parent.add_connection(connection)
        child.data = parent.data + 1
        return child

    def _route_sink(self, start: RouteTree, sink: SitePin, target_wire: Wire,
                    net_id: str, log: ContextLogger) -> RouteTree:
        """Search from the current tree to ``target_wire`` and finish at ``sink``."""
        for tree in start.preorder():
            if tree.wire is target_wire:
                terminal = self.finalize_route(tree, sink, net_id)
                log.debug(f"Reached {sink.name} from {target_wire.full_name} already in "
                          f"the route ({terminal.data} hops)")
                return terminal

        frontier = RouteFrontier.from_tree(start, target_wire.tile, start.wire.tile,
                                           self.heuristic)
        # wires already queued below each expanded node; existing children count
        explored: Dict[RouteTree, Set[Wire]] = {}
        expansions = 0

        while frontier:
            if expansions >= self.settings.max_expansions:
                self.last_expansions += expansions
                raise RoutingExhaustedError(
                    f"Gave up on sink {sink.name} of net {net_id} after {expansions} expansions",
                    net_id=net_id, sink=sink.name, expansions=expansions)

            current = frontier.pop()
            expansions += 1

            existing_branches = explored.get(current)
            if existing_branches is None:
                existing_branches = {child.wire for child in current.sink_trees}
                explored[current] = existing_branches

            for connection in current.wire.get_wire_connections():
                sink_wire = connection.sink_wire

                if sink_wire == target_wire:
                    target = self._extend(current, connection)
                    terminal = self.finalize_route(target, sink, net_id)
                    self.last_expansions += expansions
                    log.debug(f"Reached {sink.name} via {target_wire.full_name} "
                              f"in {expansions} expansions ({terminal.data} hops)")
                    return terminal

                if sink_wire not in existing_branches:
                    branch = current.add_connection(connection)
                    branch.data = current.data + 1
                    frontier.push(branch)
                    existing_branches.add(sink_wire)

        self.last_expansions += expansions
        raise RoutingExhaustedError(
            f"No path to sink {sink.name} of net {net_id}: frontier exhausted "
            f"after {expansions} expansions",
            net_id=net_id, sink=sink.name, expansions=expansions)
