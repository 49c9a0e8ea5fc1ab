"""Domain layer: identifier formats and models.

This layer depends only on stdlib, pydantic and subjectid.errors.
It must never import from services, commands, output, or config.
"""
