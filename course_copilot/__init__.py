"""
Course Copilot backend.

AI-assisted course authoring: conversational outline building, lesson
drafts, course publishing and quiz validation.
"""

__version__ = "0.1.0"
