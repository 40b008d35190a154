"""
Shared module package.

Cross-cutting concerns used by every bounded context:
- Error-to-HTTP mapping
- Security headers and request ids
- Rate limiting
- Logging configuration
"""
