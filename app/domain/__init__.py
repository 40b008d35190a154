"""
Domain layer package.

Contains entities, error classifications, and port interfaces.
This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
