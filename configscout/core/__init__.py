"""ConfigScout application core - settings."""
