"""
Bills Demo Backend: Pydantic Response Schemas
=============================================

What:  Models defining the JSON the service returns.
Why:   FastAPI serializes and documents responses from these models.
"""

import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, field_serializer


class BillRecord(BaseModel):
    """
    What:  One bill in the GET /api/bills listing.

    Example:
        {"id": 1, "amount": 100, "payee": "John Doe",
         "category": "Groceries", "date": "2022-01-01"}
    """
    id: int = Field(description="Bill identifier")
    amount: float = Field(description="Amount due")
    payee: str = Field(description="Who the bill is paid to")
    category: str = Field(description="Spending category")
    date: datetime.date = Field(description="Bill date (YYYY-MM-DD)")

    @field_serializer("amount")
    def serialize_amount(self, amount: float) -> Union[int, float]:
        """Whole amounts go out as integers: 100.0 -> 100."""
        if amount.is_integer():
            return int(amount)
        return amount


class ErrorResponse(BaseModel):
    """Standardized error body returned by the exception handlers."""
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    path: Optional[str] = Field(default=None, description="Request path that failed")


class HealthResponse(BaseModel):
    """What: Returned by GET /health for process probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")
