"""Core of bookshelf: domain, contracts, services and settings.

The core never prints; it returns data and logs diagnostics.
"""
