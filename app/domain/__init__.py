"""
Domain layer package.

Contains the data model, the store port interfaces and the storage
error taxonomy. No framework imports, no IO, no side effects.
"""
