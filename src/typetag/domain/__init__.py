"""Domain layer — tag vocabularies, boundary values, and classification.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""
