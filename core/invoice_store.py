"""
Invoice persistence.

One parameterized statement per mutation. No transactions span statements
and nothing is retried; psycopg2 errors propagate to the caller.
"""

import logging
from datetime import date

from clients.postgres_client import PostgresClient
from core.models import InvoiceStatus

logger = logging.getLogger(__name__)


class InvoiceStore:
    """Writes to the invoices table."""

    def __init__(self, postgres: PostgresClient):
        self.postgres = postgres

    def insert(self, customer_id: str, amount_cents: int, status: InvoiceStatus, invoice_date: date) -> None:
        self.postgres.execute_rowcount(
            """
            INSERT INTO invoices (customer_id, amount, status, date)
            VALUES (%s, %s, %s, %s)
            """,
            (customer_id, amount_cents, status.value, invoice_date.isoformat())
        )

    def update(self, invoice_id: str, customer_id: str, amount_cents: int, status: InvoiceStatus) -> None:
        """Update customer, amount and status. The invoice date is left as-is."""
        self.postgres.execute_rowcount(
            """
            UPDATE invoices
            SET customer_id = %s, amount = %s, status = %s
            WHERE id = %s
            """,
            (customer_id, amount_cents, status.value, invoice_id)
        )

    def delete(self, invoice_id: str) -> None:
        self.postgres.execute_rowcount(
            "DELETE FROM invoices WHERE id = %s",
            (invoice_id,)
        )
