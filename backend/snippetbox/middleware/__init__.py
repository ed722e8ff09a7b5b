# Middleware package init
"""
Snippetbox Backend - Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request, static files included.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler / Static Files

    The order is reversed for responses, so the access log sees the final
    status and the X-Request-ID header is set on every response.
"""
