"""
Application layer for the Q&A bounded context.

Request handlers invoke exactly one store operation and translate
storage errors into handler errors. No framework or infrastructure
imports allowed.
"""
