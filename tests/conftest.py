"""Test configuration and fixtures for fpgaroute."""
import logging
from types import SimpleNamespace

import pytest

from fpgaroute.infrastructure.fabric.memory_fabric import InMemoryFabric
from fpgaroute.shared.configuration import ConfigManager, config_manager


def assert_tree_invariants(root):
    """Check the structural invariants of a route tree rooted at ``root``."""
    assert root.source_tree is None
    nodes = list(root.preorder())
    assert len({id(node) for node in nodes}) == len(nodes)
    for node in nodes[1:]:
        parent = node.source_tree
        assert parent is not None
        assert sum(1 for child in parent.sink_trees if child is node) == 1
        assert node.connection.sink_wire is node.wire


@pytest.fixture
def linear_fabric():
    """S(0,0) -> A(0,1) -> T(0,2), with T's pin as the only sink.

    T has a second driver D, so the target search stops at T itself.
    """
    fabric = InMemoryFabric("linear")
    t0 = fabric.add_tile("T0", 0, 0)
    t1 = fabric.add_tile("T1", 0, 1)
    t2 = fabric.add_tile("T2", 0, 2)
    t3 = fabric.add_tile("T3", 1, 2)

    s = fabric.add_wire(t0, "S")
    a = fabric.add_wire(t1, "A")
    t = fabric.add_wire(t2, "T")
    d = fabric.add_wire(t3, "D")

    s_to_a = fabric.connect(s, a)
    a_to_t = fabric.connect(a, t)
    fabric.connect(d, t)

    source = fabric.add_site_pin(s, "SRC_O", is_input=False)
    sink = fabric.add_site_pin(t, "SNK_I", is_input=True)
    net = fabric.create_net("net_linear", source, [sink])

    return SimpleNamespace(fabric=fabric, net=net, source=source, sink=sink,
                           s=s, a=a, t=t, d=d, s_to_a=s_to_a, a_to_t=a_to_t)


@pytest.fixture
def shared_path_fabric():
    """S -> A -> B, then B fans out to X1 and X2, each ending at a sink pin."""
    fabric = InMemoryFabric("shared")
    s = fabric.add_wire(fabric.add_tile("T00", 0, 0), "S")
    a = fabric.add_wire(fabric.add_tile("T01", 0, 1), "A")
    b = fabric.add_wire(fabric.add_tile("T02", 0, 2), "B")
    x1 = fabric.add_wire(fabric.add_tile("T03", 0, 3), "X1")
    x2 = fabric.add_wire(fabric.add_tile("T12", 1, 2), "X2")

    fabric.connect(s, a)
    fabric.connect(a, b)
    fabric.connect(b, x1)
    fabric.connect(b, x2)

    source = fabric.add_site_pin(s, "SRC_O", is_input=False)
    sink1 = fabric.add_site_pin(x1, "P1", is_input=True)
    sink2 = fabric.add_site_pin(x2, "P2", is_input=True)
    net = fabric.create_net("net_shared", source, [sink1, sink2])

    return SimpleNamespace(fabric=fabric, net=net, source=source,
                           sinks=[sink1, sink2], s=s, a=a, b=b, x1=x1, x2=x2)


def build_grid_fabric(rows: int, columns: int) -> InMemoryFabric:
    """Island-style grid of tiles.

    Every tile has an output pin wire OUT, a switch wire SW linked by PIPs to
    the four neighbouring switch wires, an input mux IMUX fed by SW, and an
    input pin wire IN fed by IMUX through a fixed connection.
    """
    fabric = InMemoryFabric(f"grid{rows}x{columns}")
    for r in range(rows):
        for c in range(columns):
            tile = fabric.add_tile(f"CLB_R{r}C{c}", r, c)
            out = fabric.add_wire(tile, "OUT")
            sw = fabric.add_wire(tile, "SW")
            imux = fabric.add_wire(tile, "IMUX")
            pin_in = fabric.add_wire(tile, "IN")
            fabric.connect(out, sw)
            fabric.connect(sw, imux)
            fabric.connect(imux, pin_in, is_pip=False)
            fabric.add_site_pin(out, f"SLICE_R{r}C{c}/O", is_input=False)
            fabric.add_site_pin(pin_in, f"SLICE_R{r}C{c}/I", is_input=True)

    for r in range(rows):
        for c in range(columns):
            sw = fabric.get_wire(f"CLB_R{r}C{c}/SW")
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < columns:
                    fabric.connect(sw, f"CLB_R{nr}C{nc}/SW")
    return fabric


def grid_pin(fabric: InMemoryFabric, row: int, column: int, wire: str):
    """The site pin attached to ``CLB_R<row>C<column>/<wire>``."""
    return fabric.get_wire(f"CLB_R{row}C{column}/{wire}").get_pin_connections()[0].site_pin


@pytest.fixture
def grid_fabric():
    return build_grid_fabric(5, 5)


@pytest.fixture
def grid_net(grid_fabric):
    """Net driven from (0, 0) with sinks at (2, 3), (4, 1) and (3, 3)."""
    source = grid_pin(grid_fabric, 0, 0, "OUT")
    sinks = [grid_pin(grid_fabric, 2, 3, "IN"),
             grid_pin(grid_fabric, 4, 1, "IN"),
             grid_pin(grid_fabric, 3, 3, "IN")]
    return grid_fabric.create_net("net_grid", source, sinks)


@pytest.fixture
def isolated_root_logger(monkeypatch):
    """Throwaway root logger, so setup_logging leaves pytest's handlers alone."""
    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    yield root
    for handler in root.handlers:
        handler.close()


@pytest.fixture
def check_tree():
    return assert_tree_invariants


@pytest.fixture
def make_grid():
    return build_grid_fabric


@pytest.fixture
def pin_at():
    return grid_pin


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    """Global configuration with default settings, unaffected by files on disk."""
    manager = ConfigManager(tmp_path / "fpgaroute.json")
    monkeypatch.setattr(config_manager, "_config_manager", manager)
    return manager
