"""
Infrastructure adapters for the Q&A bounded context.

Each adapter implements a domain port (ABC) and translates
backend failures into the domain's StoreError taxonomy.
"""
