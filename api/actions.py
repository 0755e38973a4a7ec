"""Form-post routes that run the dashboard actions."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from api.base import success_response, error_response, ErrorCodes
from auth.service import AuthService
from core.forms import ActionResult
from core.services.invoice_service import InvoiceService


def _render(result: ActionResult):
    """Redirect on success, otherwise hand the form state back for re-render."""
    if result.redirect_to:
        return RedirectResponse(result.redirect_to, status_code=303)
    state = result.state.model_dump(exclude_none=True) if result.state else None
    return success_response(state).model_dump(mode="json")


def create_actions_router(invoice_service: InvoiceService, auth_service: AuthService) -> APIRouter:
    """Create actions router with injected services."""
    router = APIRouter()

    @router.post("/dashboard/invoices/create")
    async def create_invoice(request: Request):
        form = await request.form()
        return _render(invoice_service.create(None, form))

    @router.post("/dashboard/invoices/{invoice_id}/edit")
    async def update_invoice(invoice_id: str, request: Request):
        form = await request.form()
        return _render(invoice_service.update(invoice_id, None, form))

    @router.post("/dashboard/invoices/{invoice_id}/delete")
    async def delete_invoice(invoice_id: str):
        return _render(invoice_service.delete(invoice_id))

    @router.post("/login")
    async def authenticate(request: Request):
        """Sign in; unrecognized provider errors propagate to the error boundary."""
        form = await request.form()
        result = auth_service.authenticate(None, form)

        if result.error:
            return JSONResponse(
                status_code=401,
                content=error_response(ErrorCodes.INVALID_CREDENTIALS, result.error).model_dump(mode="json"),
            )
        if result.redirect_to:
            return RedirectResponse(result.redirect_to, status_code=303)
        return success_response(None).model_dump(mode="json")

    return router
