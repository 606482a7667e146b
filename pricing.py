import logging

from order_state import (
    TAX_RATE,
    TOPPING_PRICE,
    LineItem,
    OrderSelection,
    Receipt,
    Topping,
)

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Base class for selections that cannot be priced."""


class NoCrustSelected(ValidationError):
    def __init__(self):
        super().__init__("Please select a crust type.")


def price(selection: OrderSelection) -> Receipt:
    """Price a single pizza.

    Raises NoCrustSelected when no crust was chosen. Amounts are kept at full
    precision; rounding is left to whoever renders the receipt.
    """
    if selection.crust is None:
        raise NoCrustSelected()

    base = selection.size.base_price
    items = [
        LineItem(selection.crust.label),
        LineItem(f"Size: {selection.size.label}", base),
    ]
    subtotal = base
    for topping in Topping:
        if topping in selection.toppings:
            items.append(LineItem(topping.label, TOPPING_PRICE))
            subtotal += TOPPING_PRICE

    tax = subtotal * TAX_RATE
    receipt = Receipt(
        line_items=tuple(items),
        subtotal=subtotal,
        tax_rate=TAX_RATE,
        tax_amount=tax,
        total=subtotal + tax,
    )
    logger.debug("Priced %s: subtotal=%s tax=%s total=%s",
                 selection, receipt.subtotal, receipt.tax_amount, receipt.total)
    return receipt
