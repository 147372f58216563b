from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderSelection(BaseModel):
    """A customer's raw choices for one smoothie."""

    model_config = ConfigDict(frozen=True)

    size: str = ""
    base: str = ""
    fruits: tuple[str, ...] = Field(default_factory=tuple)  # order + duplicates kept
    extras: tuple[str, ...] = Field(default_factory=tuple)
    sweetener: str = ""
    customer_name: str = ""
    notes: str = ""

    @field_validator("customer_name", "notes")
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        return value.strip()


class PricedOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: Decimal = Field(ge=0, decimal_places=2)
    description: str

    @property
    def formatted_price(self) -> str:
        return f"{self.price:.2f}"


class FillDirective(BaseModel):
    """How full the smoothie cup is drawn, and with which colors."""

    model_config = ConfigDict(frozen=True)

    fill_percent: int = Field(ge=0, le=100)
    gradient: tuple[str, str] | None = None  # (top, bottom)

    @property
    def background(self) -> str | None:
        """CSS background value for the cup liquid, or None when empty."""
        if self.gradient is None:
            return None
        top, bottom = self.gradient
        return f"linear-gradient(180deg, {top}, {bottom})"


class OrderResult(BaseModel):
    """What the form shows after a submission or reset.

    `fill` is None when the cup visual should be left unchanged.
    """

    model_config = ConfigDict(frozen=True)

    summary: str
    fill: FillDirective | None = None
    priced: PricedOrder | None = None
