"""
Core domain layer.

Pure course-authoring logic with no I/O: outline extraction, the
conversation session entity, prompt assembly and quiz validation.
"""
