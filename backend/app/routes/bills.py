"""
Bills Demo Backend: Bills Route
===============================

What:  GET /api/bills returns the demo bill list as a JSON array.
How:   Delegates to BillService; FastAPI serializes the records through the
       BillRecord schema with content-type application/json.
"""

import logging
from typing import List

from fastapi import APIRouter

from app.schemas.bill import BillRecord, ErrorResponse
from app.services.bill_service import bill_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Bills"])


@router.get(
    "/bills",
    response_model=List[BillRecord],
    responses={
        200: {"description": "All bills"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List bills",
)
async def list_bills() -> List[BillRecord]:
    return bill_service.list_bills()
