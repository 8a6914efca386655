"""
Bills Demo Backend: Application Package
=======================================

What: Marks the `app` directory as a Python package.
Who:  Imported by uvicorn (`app.main:app`), the bill formatter CLI
      (`app.cli`), and pytest.

Layout:
    ┌─────────────────────────────────────┐
    │   Routes (HTTP)     │   CLI (stdin)  │
    ├─────────────────────────────────────┤
    │   Services (bill listing, file I/O) │
    ├─────────────────────────────────────┤
    │   Models & Schemas (Bill, records)  │
    └─────────────────────────────────────┘

The HTTP service and the CLI share only configuration and logging setup.
"""

__version__ = "1.0.0"
