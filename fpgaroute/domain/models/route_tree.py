"""Physical route of a single net.

A route is a tree of wires. Each node wraps one fabric wire and the
connection that was taken from its parent to reach it. The root is the
net's source wire and has no connection. Trees are grown one connection at
a time and cut back with :meth:`RouteTree.prune` once the live terminals
are known.

Nodes compare and hash by identity. Two nodes on the same wire reached
through the same connection are still different nodes.
"""
import logging
from itertools import islice
from typing import Any, Collection, Iterator, List, Optional, Tuple, Union

from .fabric import BelPin, Connection, SitePin, Wire
from ...shared.exceptions import (
    AlreadyRoutedError, ConnectionMismatchError, RouteTreeError
)

logger = logging.getLogger(__name__)


class RouteTree:
    """A node of a route tree, and the subtree hanging from it.

    ``data`` is an opaque per-node payload owned by whoever builds the tree;
    the A* router stores the hop count from the source there.

    Iterating a tree, or mutating it while iterating, follows the rules of
    :meth:`preorder`.
    """

    def __init__(self, wire: Wire, connection: Optional[Connection] = None):
        self._wire = wire
        self._connection = connection
        self._source_tree: Optional['RouteTree'] = None
        self._sink_trees: List['RouteTree'] = []
        self.data: Any = None

    def __repr__(self) -> str:
        wire_name = getattr(self._wire, 'full_name', self._wire)
        return f"RouteTree({wire_name}, sinks={len(self._sink_trees)})"

    @property
    def wire(self) -> Wire:
        return self._wire

    @property
    def connection(self) -> Optional[Connection]:
        """Connection taken from the source tree to reach this wire."""
        return self._connection

    @property
    def source_tree(self) -> Optional['RouteTree']:
        return self._source_tree

    @property
    def sink_trees(self) -> Tuple['RouteTree', ...]:
        """Children of this node, in the order they were added."""
        return tuple(self._sink_trees)

    def is_sourced(self) -> bool:
        return self._source_tree is not None

    def get_first_source(self) -> 'RouteTree':
        """Walk source links up to the root of the tree."""
        tree = self
        while tree._source_tree is not None:
            tree = tree._source_tree
        return tree

    def is_leaf(self) -> bool:
        """True if the node has no children.

        In a fully routed net every leaf sits on a wire that connects to a
        site pin or a bel pin.
        """
        return not self._sink_trees

    def get_connecting_site_pin(self) -> Optional[SitePin]:
        """Site pin reached from this node's wire, or None."""
        for connection in self._wire.get_pin_connections():
            return connection.site_pin
        return None

    def get_connecting_bel_pin(self) -> Optional[BelPin]:
        """Bel pin reached from this node's wire, or None."""
        for connection in self._wire.get_terminals():
            return connection.bel_pin
        return None

    def add_connection(self, connection: Connection,
                       sink: Optional['RouteTree'] = None) -> 'RouteTree':
        """Extend the tree through ``connection``.

        Without ``sink`` a new node is created on ``connection.sink_wire``.
        With ``sink``, that unsourced tree is attached instead and takes
        ``connection`` as its incoming connection.

        Returns:
            The attached child node.

        Raises:
            AlreadyRoutedError: ``sink`` already has a source tree.
            ConnectionMismatchError: ``connection`` does not lead to ``sink.wire``.
            RouteTreeError: ``sink`` is the root of this very tree.
        """
        if sink is None:
            sink = RouteTree(connection.sink_wire, connection)
        else:
            if sink._source_tree is not None:
                raise AlreadyRoutedError(wire=sink.wire)
            if connection.sink_wire != sink.wire:
                raise ConnectionMismatchError(wire=sink.wire)
            if sink is self.get_first_source():
                raise RouteTreeError("Attaching the tree root below itself would form a cycle",
                                     wire=sink.wire, error_code="ROUTE_CYCLE")
            sink._connection = connection

        sink._source_tree = self
        self._sink_trees.append(sink)
        return sink

    def remove_connection(self, connection: Connection) -> Optional['RouteTree']:
        """Detach the child reached through ``connection``.

        Returns:
            The detached subtree, now unsourced, or None if no child used
            ``connection``.
        """
        for index, sink in enumerate(self._sink_trees):
            if sink._connection == connection:
                del self._sink_trees[index]
                sink._source_tree = None
                return sink
        return None

    def get_all_pips(self) -> List[Connection]:
        """Programmable connections used by the whole tree, in preorder.

        The walk always starts at the root, whichever node it is called on.
        These are the switch settings that realize the route on the device.
        """
        root = self.get_first_source()
        return [tree._connection for tree in islice(root.preorder(), 1, None)
                if tree._connection is not None and tree._connection.is_pip]

    def path_from_source(self) -> List['RouteTree']:
        """Nodes from the root down to this node, both included."""
        path = [self]
        while path[-1]._source_tree is not None:
            path.append(path[-1]._source_tree)
        path.reverse()
        return path

    def wires(self) -> List[Wire]:
        """Wires of this subtree in preorder."""
        return [tree._wire for tree in self.preorder()]

    def deep_copy(self) -> 'RouteTree':
        """Copy this subtree into new, unsourced nodes.

        Wires, connections and ``data`` values are shared with the original;
        only the tree structure is duplicated.
        """
        copy = RouteTree(self._wire, self._connection)
        copy.data = self.data
        stack = [(self, copy)]
        while stack:
            original, duplicate = stack.pop()
            for child in original._sink_trees:
                child_copy = RouteTree(child._wire, child._connection)
                child_copy.data = child.data
                child_copy._source_tree = duplicate
                duplicate._sink_trees.append(child_copy)
                stack.append((child, child_copy))
        return copy

    def prune(self, terminals: Union['RouteTree', Collection['RouteTree']]) -> bool:
        """Remove every branch that does not lead to one of ``terminals``.

        Children are decided before their parent: a node survives if it is a
        terminal or if any child survived. Removed children are unsourced.

        Returns:
            True if this node itself survives.
        """
        if isinstance(terminals, RouteTree):
            terminals = {terminals}

        # reversed preorder visits every descendant before its ancestor
        survivors = set()
        removed = 0
        for tree in reversed(list(self.preorder())):
            kept = []
            for child in tree._sink_trees:
                if child in survivors:
                    kept.append(child)
                else:
                    child._source_tree = None
                    removed += 1
            tree._sink_trees = kept
            if kept or tree in terminals:
                survivors.add(tree)

        logger.debug(f"Pruned {removed} nodes, {len(survivors)} remain")
        return self in survivors

    def preorder(self) -> Iterator['RouteTree']:
        """Lazily yield this node, then its subtree depth first.

        Uses an explicit stack, so depth is not limited by recursion. Each
        call starts a fresh traversal. Children are read when their parent is
        yielded; changing the tree during a traversal gives undefined results.
        """
        stack = [self]
        while stack:
            tree = stack.pop()
            yield tree
            stack.extend(reversed(tree._sink_trees))

    def __iter__(self) -> Iterator['RouteTree']:
        return self.preorder()
