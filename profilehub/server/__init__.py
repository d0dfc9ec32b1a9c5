"""
ProfileHub Server Package.

This package contains the web server implementation for ProfileHub.
It includes the API definition, exception handlers, middleware, services and configuration.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and server-wide constants.
    exception_handlers: Mapping of errors to HTTP responses.
    middleware: Request logging and timing.
    services: Auth, upload storage and dependency helpers.
"""
