"""Dashboard configuration."""

from pydantic import BaseModel, Field


class DashboardConfig(BaseModel):
    """Paths and cache settings shared by the invoice actions."""

    invoices_path: str = Field(
        default="/dashboard/invoices",
        description="Invoice listing view; revalidated and redirected to after mutations",
    )
    page_cache_prefix: str = Field(
        default="page:",
        description="Key prefix for rendered pages in Valkey",
        min_length=1,
    )
