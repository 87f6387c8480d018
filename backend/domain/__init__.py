"""Domain entities (plain data, no storage concerns)."""
