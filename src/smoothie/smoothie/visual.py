"""Smoothie cup fill levels and colors by size."""

from .enums import Size
from .models import FillDirective

FILL_BY_SIZE: dict[Size, FillDirective] = {
    Size.SMALL: FillDirective(fill_percent=50, gradient=("#ffd5e8", "#ff9ec4")),
    Size.MEDIUM: FillDirective(fill_percent=65, gradient=("#ffe0b2", "#ffb74d")),
    Size.LARGE: FillDirective(fill_percent=80, gradient=("#c5e1a5", "#8bc34a")),
}

# Empty cup shown before an order and after a reset
NEUTRAL_FILL = FillDirective(fill_percent=0)


def fill_for_size(size: str | None) -> FillDirective | None:
    """Return the cup fill for a size.

    An unset size gives the neutral (empty) fill; an unrecognized one gives
    None, meaning the cup is left as it is.
    """
    if not size:
        return NEUTRAL_FILL
    try:
        return FILL_BY_SIZE[Size(size)]
    except ValueError:
        return None
