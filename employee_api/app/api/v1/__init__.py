"""
Version 1 of the API.

Bundles the employee and health endpoints.  Breaking changes should be
introduced in a new version subpackage to preserve compatibility.
"""
