"""
Pydantic schema definitions for API payloads.

Request and response bodies for products and the error body returned
for rejected requests.
"""
