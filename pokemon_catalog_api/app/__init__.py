"""
Application package initializer.

The catalog is organised in layers: ``core`` holds configuration,
logging and error handling, ``schemas`` the Pydantic payload models,
``services`` the in‑memory catalog (generator, store, pagination cache
and the service that ties them together) and ``api`` the versioned
HTTP routes.  Routes never touch the store directly; they always go
through the service instance created by ``create_app``.
"""

from .main import app, create_app  # noqa: F401
