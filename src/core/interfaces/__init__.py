"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: views depend on abstractions, not on httpx.
"""
