"""CLI entry point for the Smoothie Machine order form.

Usage:
    uv run --package smoothie python -m smoothie.main
"""

from loguru import logger

from .config import get_settings
from .form import selection_from_form
from .graph import OrderHandler, reset_order, submit_order
from .logging import setup_logging
from .models import FillDirective, OrderResult

CUP_WIDTH = 20

_QUIT_WORDS = ("quit", "exit", "q")


def _split_choices(raw: str) -> list[str]:
    """Turn "mango, kiwi" into ["mango", "kiwi"], dropping blanks."""
    return [choice.strip() for choice in raw.split(",") if choice.strip()]


def render_cup(fill: FillDirective | None) -> str:
    """Draw the cup fill as a text bar, e.g. `[##########----------]  50%`."""
    if fill is None:
        return ""
    filled = round(CUP_WIDTH * fill.fill_percent / 100)
    return f"[{'#' * filled}{'-' * (CUP_WIDTH - filled)}] {fill.fill_percent:>3}%"


def show(result: OrderResult) -> None:
    print(result.summary)
    cup = render_cup(result.fill)
    if cup:
        print(f"Cup: {cup}")
    print()


def read_form(first_answer: str) -> dict[str, object]:
    """Ask for the remaining order fields. `first_answer` is the name."""
    return {
        "customer_name": first_answer,
        "size": input("Size (small/medium/large): ").strip().lower(),
        "base": input("Base: ").strip(),
        "fruit": _split_choices(input("Fruits (comma-separated): ")),
        "extra": _split_choices(input("Extras (comma-separated, optional): ")),
        "sweetener": input("Sweetener (or 'none'): ").strip() or "none",
        "notes": input("Special instructions (optional): "),
    }


def run_form(handler: OrderHandler = submit_order) -> None:
    """Run the order form loop until the customer quits."""
    show(reset_order())

    while True:
        try:
            answer = input("Your name (or 'reset' / 'quit'): ").strip()
            if answer.lower() in _QUIT_WORDS:
                print("Goodbye!")
                break
            if answer.lower() == "reset":
                show(reset_order())
                continue
            fields = read_form(answer)
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break

        show(handler(selection_from_form(fields)))


def main() -> None:
    """Run the Smoothie Machine CLI."""
    settings = get_settings()

    setup_logging(level=settings.log_level, log_to_file=settings.log_to_file)
    logger.info("Starting Smoothie Machine CLI")

    print("-" * 50)
    print("The Smoothie Machine! Type 'quit' to exit.")
    print("-" * 50)
    print()

    run_form()

    logger.info("Smoothie Machine session ended")


if __name__ == "__main__":
    main()
