"""
Bills Demo Backend: Services Layer
==================================

Service Inventory:
    - BillService:     Fixed bill records for GET /api/bills
    - BillFileService: Writes bill renderings to disk for the CLI
"""
