"""
People API - Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line can carry the id.
    On the way out the id is copied into the X-Request-ID response header.
"""
