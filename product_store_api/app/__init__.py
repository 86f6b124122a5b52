"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Configuration and logging live in ``core``, request and
response models in ``schemas``, business rules and the in‑memory
product store in ``services`` and the HTTP routes in
``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
