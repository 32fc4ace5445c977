"""Database access for catalog products."""
