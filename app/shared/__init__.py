"""
Shared module package.

Cross-cutting concerns used by every router:
- Error translation
- Rate limiting
- Logging configuration
"""
