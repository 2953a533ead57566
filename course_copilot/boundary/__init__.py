"""
Boundary layer.

Adapters to the outside world: relational storage and the language model.
"""
