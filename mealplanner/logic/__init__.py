"""Core business logic layer.

Subpackages:
- planning: collecting a week of meal choices and committing them as the plan
- shopping: building and exporting shopping lists from the current plan
"""
__all__ = ["planning", "shopping"]
