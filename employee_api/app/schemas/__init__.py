"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store's record type so the API
representation can evolve independently of storage.
"""
