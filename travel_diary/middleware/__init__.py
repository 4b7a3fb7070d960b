# Middleware package init
"""
Travel Diary Backend — Middleware Package
==========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID: generate or accept the correlation id
    2. Logging: log method, path, status and duration with that id

    Responses travel back through the chain in reverse, so the access log
    sees the final status code and the Request ID middleware adds the
    X-Request-ID header last.
"""
