"""In-memory to-do board: task store service and board client."""

__version__ = "0.1.0"
