"""Domain layer — value objects, content rules, and the input parser.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
