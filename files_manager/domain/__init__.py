"""
Domain layer

Entities, value objects and repository interfaces. No infrastructure imports.
"""
