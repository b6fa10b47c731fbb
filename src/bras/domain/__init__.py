"""Domain layer — the CPF value type and its errors.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
