# app/core/cors.py

import logging
from datetime import datetime, timezone

from fastapi import Request, Response

logger = logging.getLogger(__name__)

# CORSMiddleware solo responde preflights con Origin + Access-Control-Request-Method;
# la PWA necesita estas cabeceras en todas las respuestas.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With",
    "Access-Control-Max-Age": "86400",  # 24 h
}


def apply_cors(response: Response) -> Response:
    response.headers.update(CORS_HEADERS)
    return response


async def cors_and_logging(request: Request, call_next):
    # Preflight: responder antes de rutear y antes de loguear
    if request.method == "OPTIONS":
        return apply_cors(Response(status_code=200))

    logger.info("[%s] %s %s", datetime.now(timezone.utc).isoformat(), request.method, request.url.path)
    response = await call_next(request)
    return apply_cors(response)
