"""
SBA API.

Application package root. Layers:
    - domain: Error types raised by request-handling code. No framework imports.
    - interfaces: FastAPI routers and the HttpResponse envelope.
    - shared: Cross-cutting concerns (error translation, rate limiting, logging).
    - core: Settings.
"""
