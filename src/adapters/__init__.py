"""Infrastructure adapters (catalogue files on disk)."""
