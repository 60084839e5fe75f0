"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that handler errors
are consistently translated into API responses.
"""
