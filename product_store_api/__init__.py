"""
Top‑level package for the Product Store API.

This file makes ``product_store_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``product_store_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
