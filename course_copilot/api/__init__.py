"""
HTTP API layer.

FastAPI application factory, routers and dependency wiring.
"""
