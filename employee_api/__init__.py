"""
Top-level package for the Employee API.

Marks ``employee_api`` as a package so modules within ``app`` can be
imported with fully qualified names such as ``employee_api.app.main``.
All functionality lives in submodules under ``app``.
"""

__all__ = []
