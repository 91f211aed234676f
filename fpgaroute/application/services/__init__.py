"""Application services."""
from .routing_orchestrator import RoutingOrchestrator

__all__ = ['RoutingOrchestrator']
