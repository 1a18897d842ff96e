"""
Version 1 of the API.

This subpackage bundles the recipe endpoints.  Breaking changes should
be introduced in a new version subpackage to preserve backwards
compatibility.
"""
