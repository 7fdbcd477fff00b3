"""Core graph model, traversal engine and shared types."""
