# app/core/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.cors import apply_cors

logger = logging.getLogger(__name__)


def requested_path(request: Request) -> str:
    # Ruta tal como llegó (sin decodificar %xx y sin query string)
    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    return raw.decode("latin-1").split("?", 1)[0]


def route_not_found_response(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"success": False, "message": "Route not found", "path": requested_path(request)},
    )


async def starlette_http_error_handler(request: Request, exc: StarletteHTTPException):
    # Método o ruta fuera de la tabla: siempre 404, nunca 405
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return route_not_found_response(request)
    return await http_exception_handler(request, exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # JSON inválido (cualquier ruta) o tipos incorrectos en create -> 400, no 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Invalid request body",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    # Corre fuera del middleware http, así que las cabeceras CORS van aquí
    logger.exception("[%s %s] unhandled error", request.method, request.url.path)
    response = JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal server error"},
    )
    return apply_cors(response)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, starlette_http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
