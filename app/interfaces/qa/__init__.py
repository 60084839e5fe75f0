"""
HTTP interface for the Q&A bounded context.
"""
