"""Domain layer — parameters, literal rules, and call-site analysis.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
