"""
Top‑level package for the Recipe Store API.

This file makes ``recipe_store_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``recipe_store_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
