"""ConfigScout API package."""
