"""
Bills Demo Backend: Bill Listing Service
========================================

What:  Supplies the bill records behind GET /api/bills.
How:   Builds a fresh list of BillRecord objects on every call. There is no
       store behind it; the two records are fixed demo data.
"""

import logging
from datetime import date
from typing import List

from app.schemas.bill import BillRecord

logger = logging.getLogger(__name__)


class BillService:
    """Read-only source of the demo bill records."""

    def list_bills(self) -> List[BillRecord]:
        bills = [
            BillRecord(
                id=1,
                amount=100.0,
                payee="John Doe",
                category="Groceries",
                date=date(2022, 1, 1),
            ),
            BillRecord(
                id=2,
                amount=200.0,
                payee="Jane Smith",
                category="Rent",
                date=date(2022, 2, 1),
            ),
        ]
        logger.debug("Listing %d bills", len(bills))
        return bills


bill_service = BillService()
