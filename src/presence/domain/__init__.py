"""Domain layer — the existence predicate, its registry, and the operators.

This layer depends only on stdlib.
It must never import from services, plugins, commands, or config.
"""
