"""Domain layer — the Book model and the error taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, plugins, or config.
"""
