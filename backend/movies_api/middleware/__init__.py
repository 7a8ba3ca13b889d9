# Middleware package init
"""
Movies API — Middleware Package
================================

Middleware Chain:
    Request → [CORS] → [Request ID] → [Logging] → Route Handler

    1. CORS: FastAPI's CORSMiddleware (handles preflight, decorates every response)
    2. Request ID: correlation id for logs and the X-Request-ID header; renders
       unexpected exceptions as the 500 error envelope
    3. Logging: method, path, status and duration per request
"""
