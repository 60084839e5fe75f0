"""
Application layer package.

Contains the request handlers. Each handler invokes one store
operation and translates storage errors into handler errors.
This layer depends on domain ports, never on infrastructure.
"""
