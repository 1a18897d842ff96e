"""
API package containing versioned routes.

A version subpackage (e.g. ``v1``) exposes a top‑level ``router``
which includes all of its endpoint routers.
"""
