"""
Shared module package.

Contains cross-cutting concerns used by the HTTP application:
- Error handling and mapping
- Security headers
- Rate limiting
- Logging configuration
"""
