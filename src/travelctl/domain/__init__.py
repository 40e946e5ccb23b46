"""Domain layer: country records, outcomes, and matching rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
