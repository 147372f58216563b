"""Build an OrderSelection from raw form field values."""

from collections.abc import Mapping, Sequence

from .models import OrderSelection


def _checked(values: str | Sequence[str] | None) -> tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


def selection_from_form(fields: Mapping[str, object]) -> OrderSelection:
    """Read the order form fields into a selection.

    Text fields are strings; `fruit` and `extra` hold the checked checkbox
    values in the order they appear on the form. Missing keys are treated
    as empty.
    """
    return OrderSelection(
        customer_name=fields.get("customer_name") or "",
        size=fields.get("size") or "",
        base=fields.get("base") or "",
        fruits=_checked(fields.get("fruit")),
        extras=_checked(fields.get("extra")),
        sweetener=fields.get("sweetener") or "",
        notes=fields.get("notes") or "",
    )
