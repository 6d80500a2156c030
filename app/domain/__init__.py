"""
Domain layer package.

Contains entities, port interfaces and domain errors.
This layer has ZERO external dependencies: no framework imports,
no IO, no side effects.
"""
