"""
Version 1 of the API.

This subpackage bundles the product endpoints for the first public
version of the Product Store API.
"""
