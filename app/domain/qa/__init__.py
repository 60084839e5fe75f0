"""
Q&A bounded context, domain layer.

This module contains the domain model for questions and answers,
the store contracts every backend implements, and the storage
error taxonomy those backends raise.
"""
