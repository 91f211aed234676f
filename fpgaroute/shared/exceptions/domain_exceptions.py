"""Domain-specific exceptions."""
from .base_exceptions import FpgaRouteException, RoutingError


class FabricError(FpgaRouteException):
    """Exception raised when an interconnect fabric is assembled inconsistently."""

    def __init__(self, message: str, element: str = None, **kwargs):
        """Initialize fabric error.

        Args:
            message: Error message
            element: Name of the tile or wire involved
        """
        super().__init__(message, **kwargs)
        self.element = element


class RouteTreeError(FpgaRouteException):
    """Structural violation of a route tree.

    These are contract errors: a caller tried to build a tree that is not
    a tree. They are never recovered from.
    """

    def __init__(self, message: str, wire=None, **kwargs):
        super().__init__(message, **kwargs)
        self.wire = wire


class AlreadyRoutedError(RouteTreeError):
    """Raised when attaching a node that already has a source tree."""

    def __init__(self, message: str = "Sink tree already sourced", **kwargs):
        super().__init__(message, error_code="ALREADY_ROUTED", **kwargs)


class ConnectionMismatchError(RouteTreeError):
    """Raised when a connection does not lead to the wire of the node being attached."""

    def __init__(self, message: str = "Connection does not match sink tree", **kwargs):
        super().__init__(message, error_code="CONNECTION_MISMATCH", **kwargs)


class NetRoutingError(RoutingError):
    """Exception raised when net routing fails."""

    def __init__(self, message: str, net_id: str, reason: str = None, **kwargs):
        """Initialize net routing error.

        Args:
            message: Error message
            net_id: Name of net that failed routing
            reason: Specific reason for routing failure
        """
        super().__init__(message, net_id=net_id, **kwargs)
        self.reason = reason


class InvalidNetError(NetRoutingError):
    """Exception raised for nets that cannot be routed at all (no source, no sinks)."""

    def __init__(self, message: str, net_id: str, reason: str = "invalid_net", **kwargs):
        super().__init__(message, net_id=net_id, reason=reason,
                         error_code="INVALID_NET", **kwargs)


class RoutingExhaustedError(NetRoutingError):
    """Exception raised when the search gives up before reaching a sink."""

    def __init__(self, message: str, net_id: str, sink: str = None,
                 expansions: int = 0, **kwargs):
        """Initialize routing exhausted error.

        Args:
            message: Error message
            net_id: Name of net that failed routing
            sink: Name of the sink pin that could not be reached
            expansions: Number of frontier pops performed before giving up
        """
        super().__init__(message, net_id=net_id, reason="exhausted",
                         error_code="ROUTING_EXHAUSTED", **kwargs)
        self.sink = sink
        self.expansions = expansions
