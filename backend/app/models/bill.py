"""
Bills Demo Backend: Bill Model
==============================

What:  The in-memory bill the formatter CLI builds, renames and renders.
Who:   Used by app.cli; nothing persists it.

Rendering layout (columns padded with str.format specs):

    Bill breakdown: 
    Name:              Alice
     
    pie:              ...$ 5.99 
    cake:             ...$ 7.99 
    Total:            ...$13.98

Items are kept as an ordered list of (name, price) pairs so the rendering is
identical from run to run.
"""

from typing import List, Tuple

BILL_ID = 1

# What: The fixed catalog every new bill starts with, in display order
DEFAULT_ITEMS: Tuple[Tuple[str, float], ...] = (
    ("pie", 5.99),
    ("cake", 7.99),
)

LABEL_WIDTH = 15


def format_price(value: float) -> str:
    """Shortest decimal form of a price: 5.99 -> '5.99', 10.0 -> '10'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class Bill:
    """
    A named bill of priced items.

    Attributes:
        id:    Bill identifier (always BILL_ID for bills from new_bill()).
        items: Ordered (name, price) pairs.
        name:  Display name; the only field that changes after construction.
    """

    def __init__(self, id: int, items: List[Tuple[str, float]], name: str):
        self.id = id
        self.items = items
        self.name = name

    @property
    def total(self) -> float:
        return sum(price for _, price in self.items)

    def format(self) -> str:
        """Render the bill as an aligned plain-text table."""
        lines = ["Bill breakdown: \n"]
        lines.append(f"{'Name:':<{LABEL_WIDTH}}  {self.name:>5}\n \n")
        for item, price in self.items:
            lines.append(f"{item + ':':<{LABEL_WIDTH}}  ...${format_price(price):>5} \n")
        lines.append(f"{'Total:':<{LABEL_WIDTH}}  ...${self.total:3.2f}")
        return "".join(lines)

    def update_name(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"<Bill(id={self.id}, name={self.name!r}, items={len(self.items)})>"


def new_bill(name: str) -> Bill:
    """Build a bill with the fixed id and the default two-item catalog."""
    return Bill(id=BILL_ID, items=list(DEFAULT_ITEMS), name=name)
