"""Services that run commands against the shared library data."""
