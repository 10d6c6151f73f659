"""Domain layer — i18n models and locale route matching.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
