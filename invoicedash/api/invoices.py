"""Invoice form handlers for the dashboard."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from starlette.datastructures import FormData

from invoicedash.api.dependencies import get_invoice_service, get_page_cache, read_form
from invoicedash.services.effects import Redirect, Revalidate
from invoicedash.services.invoice_service import InvoiceMutationService, MutationResult
from invoicedash.web.cache import PageCache

router = APIRouter(prefix="/dashboard/invoices", tags=["invoices"])


def apply_effects(result: MutationResult, cache: PageCache) -> Response:
    """Run the mutation's effects and turn its outcome into a response."""
    response: Response | None = None
    for effect in result.effects:
        if isinstance(effect, Revalidate):
            cache.invalidate(effect.path)
        elif isinstance(effect, Redirect):
            response = RedirectResponse(effect.path, status_code=status.HTTP_303_SEE_OTHER)
    if response is not None:
        return response

    if result.succeeded:
        status_code = status.HTTP_200_OK
    elif result.state.errors:
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(result.state.model_dump(exclude_none=True), status_code=status_code)


@router.post("/create")
def create_invoice(
    form: FormData = Depends(read_form),
    service: InvoiceMutationService = Depends(get_invoice_service),
    cache: PageCache = Depends(get_page_cache),
) -> Response:
    return apply_effects(service.create_invoice(form), cache)


@router.post("/{invoice_id}/edit")
def update_invoice(
    invoice_id: str,
    form: FormData = Depends(read_form),
    service: InvoiceMutationService = Depends(get_invoice_service),
    cache: PageCache = Depends(get_page_cache),
) -> Response:
    return apply_effects(service.update_invoice(invoice_id, form), cache)


@router.post("/{invoice_id}/delete")
def delete_invoice(
    invoice_id: str,
    service: InvoiceMutationService = Depends(get_invoice_service),
    cache: PageCache = Depends(get_page_cache),
) -> Response:
    return apply_effects(service.delete_invoice(invoice_id), cache)
