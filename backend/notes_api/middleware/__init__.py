# Middleware package init
"""
Notes API — Middleware Package
================================

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [Security Headers] → [GZip] → [CORS] → Route

    1. Request ID outermost: everything below logs with the id
    2. Logging: sees the final status of every response
    3. Security headers: applied to error responses as well
    4. GZip: compresses bodies of 500 bytes and up
    5. CORS: answers preflight OPTIONS for the configured origins
"""
