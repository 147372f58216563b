"""Order pricing and description.

Every function here is pure: the result depends only on the selection passed
in, so repeated calls give identical output.
"""

from decimal import ROUND_HALF_UP, Decimal

from loguru import logger

from .enums import NO_SWEETENER, Size
from .models import OrderSelection, PricedOrder

SIZE_PRICES: dict[Size, Decimal] = {
    Size.SMALL: Decimal("4.00"),
    Size.MEDIUM: Decimal("5.00"),
    Size.LARGE: Decimal("6.00"),
}
FRUIT_PRICE = Decimal("0.75")
EXTRA_PRICE = Decimal("0.80")
SWEETENER_SURCHARGE = Decimal("0.30")

_CENTS = Decimal("0.01")


class IncompleteOrderError(ValueError):
    """Raised when pricing a selection that is missing required fields."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Order is missing required fields: {', '.join(missing)}")


def known_size(selection: OrderSelection) -> Size | None:
    """Return the selection's size as a Size, or None if unset/unrecognized."""
    try:
        return Size(selection.size)
    except ValueError:
        return None


def compute_price(selection: OrderSelection) -> Decimal:
    price = Decimal("0")

    size = known_size(selection)
    if size is not None:
        price += SIZE_PRICES[size]

    # Duplicate entries are each charged
    price += len(selection.fruits) * FRUIT_PRICE
    price += len(selection.extras) * EXTRA_PRICE

    if selection.sweetener and selection.sweetener != NO_SWEETENER:
        price += SWEETENER_SURCHARGE

    return price.quantize(_CENTS, rounding=ROUND_HALF_UP)


def capitalize(text: str) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:]


def describe(selection: OrderSelection) -> str:
    """Return a one-sentence description of the smoothie."""
    size_label = capitalize(selection.size)
    fruit_list = ", ".join(selection.fruits)
    extras_list = ", ".join(selection.extras) if selection.extras else "no extras"
    sweetener_label = (
        "no added sweetener"
        if selection.sweetener == NO_SWEETENER
        else selection.sweetener
    )

    return (
        f"{size_label} smoothie with {selection.base}, featuring {fruit_list}; "
        f"{extras_list}; and {sweetener_label}."
    )


def missing_fields(selection: OrderSelection) -> list[str]:
    """List the required fields the selection is missing, in form order."""
    missing = []
    if known_size(selection) is None:
        missing.append("size")
    if not selection.base:
        missing.append("base")
    if not selection.fruits:
        missing.append("fruits")
    return missing


def validate(selection: OrderSelection) -> bool:
    return not missing_fields(selection)


def price_order(selection: OrderSelection) -> PricedOrder:
    """Price and describe a complete selection.

    Raises:
        IncompleteOrderError: if size, base or fruits are missing.
    """
    missing = missing_fields(selection)
    if missing:
        raise IncompleteOrderError(missing)

    priced = PricedOrder(price=compute_price(selection), description=describe(selection))
    logger.debug("Priced order at {}: {}", priced.formatted_price, priced.description)
    return priced
