"""Login form handler."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from starlette.datastructures import FormData

from invoicedash.api.dependencies import get_auth_gateway, read_form
from invoicedash.auth.gateway import AuthGateway

router = APIRouter(tags=["auth"])

DASHBOARD_PATH = "/dashboard"


@router.post("/login")
def login(
    form: FormData = Depends(read_form),
    gateway: AuthGateway = Depends(get_auth_gateway),
) -> Response:
    message = gateway.authenticate(form)
    if message is None:
        return RedirectResponse(DASHBOARD_PATH, status_code=status.HTTP_303_SEE_OTHER)
    return JSONResponse({"message": message}, status_code=status.HTTP_401_UNAUTHORIZED)
