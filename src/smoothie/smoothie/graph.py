"""LangGraph smoothie order flow.

START -> validate_selection -> price_order -> render_summary -> END
START -> validate_selection -> prompt_incomplete -> END

Every node is a pure function of the state it receives; the compiled graph
holds no per-order state, so submissions never interfere with each other.

Exported as `graph`.
"""

from collections.abc import Callable
from typing import TypedDict

from langgraph.graph import END, START, StateGraph
from loguru import logger

from . import pricing
from .config import get_settings
from .models import OrderResult, OrderSelection, PricedOrder
from .summary import INCOMPLETE_ORDER_PROMPT, RESET_PROMPT, compose_summary
from .visual import NEUTRAL_FILL, fill_for_size

# Boundary handed to a presentation layer: selection in, result out
OrderHandler = Callable[[OrderSelection], OrderResult]


# ---------------------------------------------------------------------------
# State Schema
# ---------------------------------------------------------------------------


class OrderState(TypedDict, total=False):
    """State for one pass through the order flow."""

    selection: OrderSelection  # What the customer picked
    priced: PricedOrder  # Set only for complete selections
    result: OrderResult  # What the form shows


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


def validate_selection(state: OrderState) -> str:
    """Route a complete selection to pricing, anything else to the prompt.

    Returns:
        "valid": size, base and at least one fruit are present
        "incomplete": one or more required fields are missing
    """
    missing = pricing.missing_fields(state["selection"])
    if missing:
        logger.info("Incomplete order, missing: {}", ", ".join(missing))
        return "incomplete"

    logger.debug("validate_selection -> valid")
    return "valid"


def price_order(state: OrderState) -> dict:
    return {"priced": pricing.price_order(state["selection"])}


def render_summary(state: OrderState) -> dict:
    """Build the thank-you summary and the cup fill for a priced order."""
    selection = state["selection"]
    priced = state["priced"]
    summary = compose_summary(
        selection, priced, currency_symbol=get_settings().currency_symbol
    )
    logger.info(
        "Order placed: {} smoothie, total {}", selection.size, priced.formatted_price
    )
    return {
        "result": OrderResult(
            summary=summary, fill=fill_for_size(selection.size), priced=priced
        )
    }


def prompt_incomplete(state: OrderState) -> dict:
    # No fill change and nothing priced
    return {"result": OrderResult(summary=INCOMPLETE_ORDER_PROMPT)}


# ---------------------------------------------------------------------------
# Graph Construction
# ---------------------------------------------------------------------------

_builder = StateGraph(OrderState)
_builder.add_node("price_order", price_order)
_builder.add_node("render_summary", render_summary)
_builder.add_node("prompt_incomplete", prompt_incomplete)

_builder.add_conditional_edges(
    START,
    validate_selection,
    {
        "valid": "price_order",
        "incomplete": "prompt_incomplete",
    },
)
_builder.add_edge("price_order", "render_summary")
_builder.add_edge("render_summary", END)
_builder.add_edge("prompt_incomplete", END)

graph = _builder.compile()


def submit_order(selection: OrderSelection) -> OrderResult:
    """Run one submission through the order flow."""
    logger.debug("Submitting order: {}", selection.model_dump())
    final_state = graph.invoke({"selection": selection})
    return final_state["result"]


def reset_order() -> OrderResult:
    """Return the form's initial state: placeholder text and an empty cup."""
    logger.debug("Order form reset")
    return OrderResult(summary=RESET_PROMPT, fill=NEUTRAL_FILL)
