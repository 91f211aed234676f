"""In-memory interconnect fabric.

Builds small device graphs programmatically: tiles on a row/column grid,
named wires in tiles, and PIP or fixed connections between wires. Every
forward connection gets a matching reverse connection on its sink wire.
"""
import logging
from typing import Dict, Iterable, List, Optional, Union

from ...domain.models.fabric import BelPin, Connection, Net, SitePin, Tile, Wire
from ...shared.exceptions import FabricError

logger = logging.getLogger(__name__)


class GridTile(Tile):
    """Tile at a fixed row and column."""

    def __init__(self, name: str, row: int, column: int):
        self._name = name
        self._row = row
        self._column = column

    def __repr__(self) -> str:
        return f"GridTile({self._name}, row={self._row}, column={self._column})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column


class FabricWire(Wire):
    """Wire whose connection lists are filled by :class:`InMemoryFabric`."""

    def __init__(self, tile: GridTile, name: str):
        self._tile = tile
        self._name = name
        self._forward: List[Connection] = []
        self._reverse: List[Connection] = []
        self._pin_connections: List[Connection] = []
        self._terminals: List[Connection] = []

    def __repr__(self) -> str:
        return f"FabricWire({self.full_name})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def tile(self) -> GridTile:
        return self._tile

    def get_wire_connections(self) -> List[Connection]:
        return self._forward

    def get_reverse_wire_connections(self) -> List[Connection]:
        return self._reverse

    def get_pin_connections(self) -> List[Connection]:
        return self._pin_connections

    def get_terminals(self) -> List[Connection]:
        return self._terminals


class WireConnection(Connection):
    """Wire-to-wire connection, equal to any other with the same endpoints and kind."""

    def __init__(self, source_wire: Wire, sink_wire: Wire, is_pip: bool = True):
        self._source_wire = source_wire
        self._sink_wire = sink_wire
        self._is_pip = is_pip

    def __repr__(self) -> str:
        arrow = "->" if self._is_pip else "=>"
        return f"{self._source_wire.full_name}{arrow}{self._sink_wire.full_name}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, WireConnection):
            return NotImplemented
        return (self._source_wire is other._source_wire
                and self._sink_wire is other._sink_wire
                and self._is_pip == other._is_pip)

    def __hash__(self) -> int:
        return hash((id(self._source_wire), id(self._sink_wire), self._is_pip))

    @property
    def source_wire(self) -> Wire:
        return self._source_wire

    @property
    def sink_wire(self) -> Wire:
        return self._sink_wire

    @property
    def is_pip(self) -> bool:
        return self._is_pip


class PinConnection(Connection):
    """Connection from a wire to a site pin or bel pin. Leads to no further wire."""

    def __init__(self, wire: Wire, site_pin: Optional[SitePin] = None,
                 bel_pin: Optional[BelPin] = None):
        self._wire = wire
        self._site_pin = site_pin
        self._bel_pin = bel_pin

    def __repr__(self) -> str:
        pin = self._site_pin or self._bel_pin
        return f"{self._wire.full_name}=>{pin.name}"

    @property
    def sink_wire(self) -> None:
        return None

    @property
    def is_pip(self) -> bool:
        return False

    @property
    def site_pin(self) -> Optional[SitePin]:
        return self._site_pin

    @property
    def bel_pin(self) -> Optional[BelPin]:
        return self._bel_pin


class FabricSitePin(SitePin):
    def __init__(self, name: str, external_wire: Wire, is_input: bool):
        self._name = name
        self._external_wire = external_wire
        self._is_input = is_input

    def __repr__(self) -> str:
        direction = "in" if self._is_input else "out"
        return f"FabricSitePin({self._name}, {direction})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def external_wire(self) -> Wire:
        return self._external_wire

    @property
    def is_input(self) -> bool:
        return self._is_input


class FabricBelPin(BelPin):
    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return f"FabricBelPin({self._name})"

    @property
    def name(self) -> str:
        return self._name


class CellNet(Net):
    """Net with one source site pin and any number of other site pins."""

    def __init__(self, name: str, source_pin: Optional[SitePin],
                 pins: Iterable[SitePin] = ()):
        self._name = name
        self._source_pin = source_pin
        self._pins: List[SitePin] = [source_pin] if source_pin is not None else []
        self._pins.extend(pin for pin in pins if pin is not source_pin)

    def __repr__(self) -> str:
        return f"CellNet({self._name}, pins={len(self._pins)})"

    @property
    def name(self) -> str:
        return self._name

    def get_source_site_pin(self) -> Optional[SitePin]:
        return self._source_pin

    def get_site_pins(self) -> List[SitePin]:
        return list(self._pins)


WireRef = Union[FabricWire, str]


class InMemoryFabric:
    """Mutable device graph for assembling fabrics in code."""

    def __init__(self, name: str = "fabric"):
        self.name = name
        self._tiles: Dict[str, GridTile] = {}
        self._wires: Dict[str, FabricWire] = {}
        self.connection_count = 0

    def __repr__(self) -> str:
        return (f"InMemoryFabric({self.name}, tiles={len(self._tiles)}, "
                f"wires={len(self._wires)}, connections={self.connection_count})")

    @property
    def tiles(self) -> List[GridTile]:
        return list(self._tiles.values())

    @property
    def wires(self) -> List[FabricWire]:
        return list(self._wires.values())

    def add_tile(self, name: str, row: int, column: int) -> GridTile:
        """Add a tile. Tile names are unique."""
        if name in self._tiles:
            raise FabricError(f"Duplicate tile {name}", element=name)
        tile = GridTile(name, row, column)
        self._tiles[name] = tile
        return tile

    def get_tile(self, name: str) -> GridTile:
        try:
            return self._tiles[name]
        except KeyError:
            raise FabricError(f"Unknown tile {name}", element=name) from None

    def add_wire(self, tile: Union[GridTile, str], name: str) -> FabricWire:
        """Add a wire to a tile. Wire names are unique within a tile."""
        if isinstance(tile, str):
            tile = self.get_tile(tile)
        wire = FabricWire(tile, name)
        if wire.full_name in self._wires:
            raise FabricError(f"Duplicate wire {wire.full_name}", element=wire.full_name)
        self._wires[wire.full_name] = wire
        return wire

    def get_wire(self, full_name: str) -> FabricWire:
        """Look up a wire by ``"<tile>/<wire>"``."""
        try:
            return self._wires[full_name]
        except KeyError:
            raise FabricError(f"Unknown wire {full_name}", element=full_name) from None

    def _resolve(self, wire: WireRef) -> FabricWire:
        return self.get_wire(wire) if isinstance(wire, str) else wire

    def connect(self, source: WireRef, sink: WireRef, is_pip: bool = True) -> WireConnection:
        """Connect ``source`` to ``sink`` and record the reverse connection on ``sink``."""
        source = self._resolve(source)
        sink = self._resolve(sink)
        forward = WireConnection(source, sink, is_pip)
        source._forward.append(forward)
        sink._reverse.append(WireConnection(sink, source, is_pip))
        self.connection_count += 1
        return forward

    def add_site_pin(self, wire: WireRef, name: str, is_input: bool = True) -> FabricSitePin:
        """Attach a site pin to ``wire``, which becomes the pin's external wire."""
        wire = self._resolve(wire)
        pin = FabricSitePin(name, wire, is_input)
        wire._pin_connections.append(PinConnection(wire, site_pin=pin))
        return pin

    def add_bel_pin(self, wire: WireRef, name: str) -> FabricBelPin:
        """Terminate ``wire`` at a bel pin."""
        wire = self._resolve(wire)
        pin = FabricBelPin(name)
        wire._terminals.append(PinConnection(wire, bel_pin=pin))
        return pin

    def create_net(self, name: str, source_pin: Optional[SitePin],
                   sink_pins: Iterable[SitePin] = ()) -> CellNet:
        net = CellNet(name, source_pin, sink_pins)
        logger.debug(f"Created net {name} with {len(net.get_site_pins())} pins")
        return net
