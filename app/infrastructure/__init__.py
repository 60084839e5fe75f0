"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the PostgreSQL stores, the
in-memory stores, and engine/schema setup.
"""
