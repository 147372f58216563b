"""Text shown in the order summary panel."""

from .models import OrderSelection, PricedOrder

INCOMPLETE_ORDER_PROMPT = (
    "Please choose a size, a base, and at least one fruit to order your smoothie."
)
RESET_PROMPT = (
    'Fill in the form and click "Order smoothie" to see your custom blend and price.'
)


def compose_summary(
    selection: OrderSelection, priced: PricedOrder, currency_symbol: str = "$"
) -> str:
    """Build the thank-you message for a priced order.

    Example:
        Thanks, Sam! Small smoothie with oat milk, featuring banana; no extras;
        and no added sweetener. Your total is $4.75.
    """
    if selection.customer_name:
        intro = f"Thanks, {selection.customer_name}! "
    else:
        intro = "Thanks for your order! "

    text = f"{intro}{priced.description} Your total is {currency_symbol}{priced.formatted_price}."
    if selection.notes:
        text += f' Special instructions: "{selection.notes}".'
    return text
