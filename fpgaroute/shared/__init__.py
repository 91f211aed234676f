"""Cross-cutting concerns: configuration, exceptions, utilities."""
