"""
Application package initializer.

Contains the main entrypoint for the API and its submodules: ``core``
(configuration, logging, errors and the in-memory employee store),
``schemas`` (request and response models), ``services`` (logic
between schemas and the store) and ``api`` (versioned routers and
error handlers).
"""

from .main import app  # noqa: F401
