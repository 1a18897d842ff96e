"""
Application package initializer.

This package contains the entrypoint for the API and its submodules.
The code is split into a handful of layers: ``core`` (configuration,
logging and the error taxonomy), ``schemas`` (request and response
bodies), ``services`` (the in‑memory recipe collection) and ``api``
(versioned routers that translate HTTP requests into service calls).
"""

from .main import app, create_app  # noqa: F401
