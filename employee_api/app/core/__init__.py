"""Core building blocks: configuration, logging, errors and the employee store.

Modules here do not depend on the API layer.
"""
