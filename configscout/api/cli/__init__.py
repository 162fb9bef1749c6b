"""ConfigScout CLI API package - modular command-line interface."""

# Commands are imported lazily in main.py when needed
