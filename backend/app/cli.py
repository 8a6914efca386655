"""
Bills Demo Backend: Bill Formatter CLI
======================================

What:  Console program that builds a bill, lets the operator rename it, and
       saves the final rendering.
How:   Strictly sequential:
           build → render → print → prompt for name → rename
           → render → print → write to bill.txt
Who:   Run as `bill-formatter` or `python -m app.cli`.

A failed write is reported on stdout and the program still exits 0. Errors
reading stdin propagate.
"""

import logging
import sys
from typing import Optional, TextIO

from app.exceptions import FileStorageError
from app.logging_config import setup_logging
from app.models.bill import new_bill
from app.services.file_service import BillFileService, file_service

logger = logging.getLogger(__name__)

INITIAL_NAME = "old name"
PROMPT = "Enter new name: "


def get_input(prompt: str, reader: TextIO) -> str:
    """Print `prompt` without a newline and read one line, stripped."""
    print(prompt, end="", flush=True)
    return reader.readline().strip()


def main(stdin: Optional[TextIO] = None, writer: Optional[BillFileService] = None) -> int:
    """
    Run the formatter flow.

    Args:
        stdin:  Input stream for the rename prompt (defaults to sys.stdin).
        writer: File service for the final rendering (defaults to the
                shared file_service, which writes settings.bill_output_path).

    Returns:
        Process exit status; always 0.
    """
    setup_logging(stream=sys.stderr)
    reader = stdin if stdin is not None else sys.stdin
    writer = writer or file_service

    my_bill = new_bill(INITIAL_NAME)
    print("bill:", my_bill.format())

    name = get_input(PROMPT, reader)
    logger.debug("Renaming bill %r -> %r", my_bill.name, name)
    my_bill.update_name(name)
    print("bill:", my_bill.format())

    try:
        writer.write_rendering(my_bill.format())
    except FileStorageError as e:
        print("Error writing file:", e.message)

    return 0


if __name__ == "__main__":
    sys.exit(main())
