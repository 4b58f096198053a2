"""
Service layer abstraction.

Services encapsulate the logic between API handlers and storage.  The
employee service works against the in-memory store; swapping in a
database would not change the API handlers.
"""
