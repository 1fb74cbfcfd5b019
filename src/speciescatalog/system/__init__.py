"""System-level helpers (path resolution)."""
