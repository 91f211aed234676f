"""Shape statistics of a routed net."""
import numpy as np

from ..models.route_tree import RouteTree
from ..models.routing import RouteMetrics


def compute_route_metrics(tree: RouteTree) -> RouteMetrics:
    """Measure the subtree rooted at ``tree``.

    Tile coordinates of every node are gathered into arrays so the bounding
    box and per-edge distances are computed in one pass each.
    """
    nodes = list(tree.preorder())
    index = {id(node): i for i, node in enumerate(nodes)}

    rows = np.fromiter((node.wire.tile.row for node in nodes), dtype=np.int64, count=len(nodes))
    cols = np.fromiter((node.wire.tile.column for node in nodes), dtype=np.int64, count=len(nodes))

    # parent index per node, -1 for the subtree root
    parents = np.full(len(nodes), -1, dtype=np.int64)
    depths = np.zeros(len(nodes), dtype=np.int64)
    for i, node in enumerate(nodes[1:], start=1):
        parent = index[id(node.source_tree)]
        parents[i] = parent
        depths[i] = depths[parent] + 1  # preorder puts parents first

    parent_of = parents[1:]
    wirelength = int(np.abs(rows[1:] - rows[parent_of]).sum()
                     + np.abs(cols[1:] - cols[parent_of]).sum())

    pip_count = sum(1 for node in nodes[1:]
                    if node.connection is not None and node.connection.is_pip)

    return RouteMetrics(
        node_count=len(nodes),
        pip_count=pip_count,
        leaf_count=sum(1 for node in nodes if node.is_leaf()),
        depth=int(depths.max()),
        wirelength=wirelength,
        bounding_box=(int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max())),
    )
