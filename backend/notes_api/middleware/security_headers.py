"""
Notes API — Security Headers Middleware
=========================================

What:  Adds a fixed set of browser hardening headers to every response.
Why:   The API is called cross-origin from a browser frontend; these headers
       stop MIME sniffing, framing, referrer leakage and cross-origin reads
       of responses the frontend did not ask for.
How:   Sets each header unless the route already set its own value.
Who:   Applied to every request via Starlette middleware.

Headers:
    Strict-Transport-Security          max-age=15552000; includeSubDomains
    X-Content-Type-Options             nosniff
    X-Frame-Options                    SAMEORIGIN
    Referrer-Policy                    no-referrer
    X-XSS-Protection                   0 (legacy auditor disabled)
    Cross-Origin-Opener-Policy         same-origin
    Cross-Origin-Resource-Policy       same-origin
    Origin-Agent-Cluster               ?1
    X-DNS-Prefetch-Control             off
    X-Download-Options                 noopen
    X-Permitted-Cross-Domain-Policies  none
"""

from typing import Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

DEFAULT_SECURITY_HEADERS: Dict[str, str] = {
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-XSS-Protection": "0",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware that stamps security headers onto responses.

    Args:
        headers: Overrides merged over DEFAULT_SECURITY_HEADERS; a value of
                 "" drops that header entirely.
    """

    def __init__(self, app: ASGIApp, headers: Optional[Dict[str, str]] = None):
        super().__init__(app)
        merged = {**DEFAULT_SECURITY_HEADERS, **(headers or {})}
        self.headers = {name: value for name, value in merged.items() if value}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
