"""Abstract interconnect fabric consumed by the router.

A device fabric is a directed graph whose nodes are wires and whose edges
are connections. The router only reads it; building one (from a device
database or programmatically, see ``infrastructure.fabric``) happens
elsewhere.
"""
from abc import ABC, abstractmethod
from typing import Collection, Iterable, Optional


class Tile(ABC):
    """A tile of the device grid."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def row(self) -> int:
        pass

    @property
    @abstractmethod
    def column(self) -> int:
        pass


class BelPin(ABC):
    """A pin on a logic primitive inside a site."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass


class SitePin(ABC):
    """A pin on the boundary of a placeable site."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def external_wire(self) -> 'Wire':
        """The fabric wire outside the site that this pin attaches to."""
        pass

    @property
    @abstractmethod
    def is_input(self) -> bool:
        pass


class Connection(ABC):
    """A directed wire-to-wire edge.

    ``is_pip`` connections are programmable switches whose state is part of
    a routing solution; the rest are fixed links between the two names of
    one physical wire. Connections listed in a wire's reverse connections
    report the driving wire as their ``sink_wire``.
    """

    @property
    @abstractmethod
    def sink_wire(self) -> 'Wire':
        pass

    @property
    @abstractmethod
    def is_pip(self) -> bool:
        pass

    @property
    def site_pin(self) -> Optional[SitePin]:
        return None

    @property
    def bel_pin(self) -> Optional[BelPin]:
        return None


class Wire(ABC):
    """An addressable segment of the interconnect."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def tile(self) -> Tile:
        pass

    @property
    def full_name(self) -> str:
        return f"{self.tile.name}/{self.name}"

    @abstractmethod
    def get_wire_connections(self) -> Collection[Connection]:
        """Forward connections leaving this wire."""
        pass

    @abstractmethod
    def get_reverse_wire_connections(self) -> Collection[Connection]:
        """Connections arriving at this wire; their ``sink_wire`` is the driver."""
        pass

    @abstractmethod
    def get_pin_connections(self) -> Collection[Connection]:
        """Connections to site pins. Non-empty iff the wire ends at a site pin."""
        pass

    @abstractmethod
    def get_terminals(self) -> Collection[Connection]:
        """Connections to bel pins. Non-empty iff the wire ends at a bel pin."""
        pass


class Net(ABC):
    """The minimal view of a logical net needed to seed routing."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def get_source_site_pin(self) -> Optional[SitePin]:
        pass

    @abstractmethod
    def get_site_pins(self) -> Iterable[SitePin]:
        """All site pins of the net, source included."""
        pass
