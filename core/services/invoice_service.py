"""
Invoice form actions: create, update, delete.

Each action validates the submitted form, performs one mutation against the
store, and on success revalidates the invoice listing. Failures come back as
form state for re-rendering; nothing here raises to the caller.
"""

import logging
from typing import Any, Mapping

from core.config import DashboardConfig
from core.forms import ActionResult, FormState, safe_parse
from core.invoice_store import InvoiceStore
from core.models import InvoiceForm
from core.page_cache import PageCache
from utils.timezone import today_utc

logger = logging.getLogger(__name__)


class InvoiceService:
    """Form actions for invoices."""

    CREATE_INVALID = "Missing Fields. Failed to Create Invoice."
    CREATE_FAILED = "Database Error: Failed to Create Invoice."
    UPDATE_INVALID = "Missing Fields. Failed to Updated Invoice."
    UPDATE_FAILED = "Database Error: Failed to Update Invoice."
    DELETE_FAILED = "Database Error: Failed to Delete Invoice."

    def __init__(self, store: InvoiceStore, page_cache: PageCache, config: DashboardConfig):
        self.store = store
        self.page_cache = page_cache
        self.config = config

    def create(self, prev_state: FormState | None, form: Mapping[str, Any]) -> ActionResult:
        """
        Create an invoice from form input.

        Args:
            prev_state: State from the previous render (unused)
            form: Raw form fields (customerId, amount, status)

        Returns:
            redirect_to the listing on success, otherwise form state with
            field errors or a database error message.
        """
        parsed = safe_parse(InvoiceForm, form)
        if not parsed.success:
            return ActionResult(state=FormState(errors=parsed.errors, message=self.CREATE_INVALID))

        data = parsed.data
        invoice_date = today_utc()

        try:
            self.store.insert(data.customer_id, data.amount_in_cents, data.status, invoice_date)
        except Exception:
            logger.exception("Failed to create invoice")
            return ActionResult(state=FormState(message=self.CREATE_FAILED))

        logger.info(
            f"Created invoice for customer {data.customer_id}: "
            f"{data.amount_in_cents} cents, {data.status.value}, {invoice_date.isoformat()}"
        )

        self.page_cache.revalidate_path(self.config.invoices_path)
        return ActionResult(redirect_to=self.config.invoices_path)

    def update(self, invoice_id: str, prev_state: FormState | None, form: Mapping[str, Any]) -> ActionResult:
        """
        Update an invoice's customer, amount and status.

        The invoice date is never touched.

        Args:
            invoice_id: Invoice identifier
            prev_state: State from the previous render (unused)
            form: Raw form fields (customerId, amount, status)
        """
        parsed = safe_parse(InvoiceForm, form)
        if not parsed.success:
            return ActionResult(state=FormState(errors=parsed.errors, message=self.UPDATE_INVALID))

        data = parsed.data

        try:
            self.store.update(invoice_id, data.customer_id, data.amount_in_cents, data.status)
        except Exception:
            logger.exception(f"Failed to update invoice {invoice_id}")
            return ActionResult(state=FormState(message=self.UPDATE_FAILED))

        logger.info(f"Updated invoice {invoice_id}")

        self.page_cache.revalidate_path(self.config.invoices_path)
        return ActionResult(redirect_to=self.config.invoices_path)

    def delete(self, invoice_id: str) -> ActionResult:
        """
        Delete an invoice by id.

        The id is passed through as given. Invoked from the listing itself,
        so success revalidates the listing without redirecting.
        """
        try:
            self.store.delete(invoice_id)
            self.page_cache.revalidate_path(self.config.invoices_path)
        except Exception:
            logger.exception(f"Failed to delete invoice {invoice_id}")
            return ActionResult(state=FormState(message=self.DELETE_FAILED))

        logger.info(f"Deleted invoice {invoice_id}")
        return ActionResult()
