from fastapi import APIRouter, Request

from app.core.errors import route_not_found_response

# Debe incluirse al final: captura todo lo que no coincidió antes.
# Los métodos que no están aquí llegan como 405 y errors.py los convierte en 404.
router = APIRouter()

@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
    include_in_schema=False,
)
def route_not_found(request: Request, path: str):
    return route_not_found_response(request)
