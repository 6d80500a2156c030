"""
Cross-cutting concerns shared by every router.

- errors: domain error to HTTP status mapping
- security: response headers and rate limiting
- logging: log configuration and per-request access lines
"""
