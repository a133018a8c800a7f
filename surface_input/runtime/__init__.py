"""Runtime implementations for surface input."""
