"""Single-line terminal editor with syntax colouring, history and completion."""

__version__ = "0.1.0"