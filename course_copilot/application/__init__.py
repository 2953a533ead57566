"""
Application layer.

Use-case services that coordinate the core domain with the database and
language model boundaries.
"""
