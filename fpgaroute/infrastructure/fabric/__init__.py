"""Fabric implementations."""
from .memory_fabric import (
    InMemoryFabric, GridTile, FabricWire, WireConnection, PinConnection,
    FabricSitePin, FabricBelPin, CellNet
)

__all__ = [
    'InMemoryFabric', 'GridTile', 'FabricWire', 'WireConnection', 'PinConnection',
    'FabricSitePin', 'FabricBelPin', 'CellNet'
]
