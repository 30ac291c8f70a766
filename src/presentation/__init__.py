"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it calls the application service and translates results to
HTTP responses.

Structure:
- routers/system.py: Root, health and config endpoints
- routers/api/v1/: API version 1 endpoints (app connections)
- routers/api/middleware/: Trace ID middleware and actor dependencies

The presentation layer depends on the application layer but contains NO
business logic.
"""
