"""Core domain models."""

from core.models.invoice import InvoiceForm, InvoiceStatus, to_cents
from core.models.signup import SignupForm

__all__ = [
    # Invoice
    "InvoiceForm", "InvoiceStatus", "to_cents",
    # Signup
    "SignupForm",
]
