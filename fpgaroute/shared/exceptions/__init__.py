"""Shared exceptions for fpgaroute."""
from .base_exceptions import (
    FpgaRouteException, ConfigurationError, ValidationError, RoutingError
)
from .domain_exceptions import (
    FabricError, RouteTreeError, AlreadyRoutedError, ConnectionMismatchError,
    NetRoutingError, InvalidNetError, RoutingExhaustedError
)

__all__ = [
    'FpgaRouteException', 'ConfigurationError', 'ValidationError', 'RoutingError',
    'FabricError', 'RouteTreeError', 'AlreadyRoutedError', 'ConnectionMismatchError',
    'NetRoutingError', 'InvalidNetError', 'RoutingExhaustedError'
]
