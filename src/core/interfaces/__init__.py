"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete services implement.
- Commands depend on the contract, not on `LibraryData` itself.
"""
