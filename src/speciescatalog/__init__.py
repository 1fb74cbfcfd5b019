"""In-memory catalog of flora and fauna species with an interactive menu client."""

__version__ = "1.0.0"
