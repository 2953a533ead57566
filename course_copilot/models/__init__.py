"""
API contract models.

Pydantic request/response schemas for the HTTP surface.
"""
