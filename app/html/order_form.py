from jinja2 import Environment

from orders.models import Order


CAKE_TYPES = ("Whole wheat", "Chocolate", "Red velvet", "Carrot")


FILLINGS = ("Strawberries", "Banana", "Chocolate chips", "Sprinkles")


def element_id(label: str) -> str:
    """Label to element id, e.g. "Whole wheat" -> "whole-wheat"."""
    return "-".join(label.lower().split())


class Choice:
    def __init__(self, label: str, *, checked: bool) -> None:
        self.label = label
        self.id = element_id(label)
        self.checked = checked


class OrderForm:
    def __init__(
        self,
        order: Order,
        *,
        environment: Environment,
        error: str | None = None,
        template_name: str = "index.html",
    ) -> None:
        self.order = order
        self.error = error
        self.env = environment
        self.name = template_name

    @property
    def deliver_to(self) -> str:
        return self.order.name

    @property
    def cake_type(self) -> str:
        return self.order.cake_type

    @property
    def fillings(self) -> str:
        return ", ".join(self.order.fillings)

    @property
    def cake_types(self) -> list[Choice]:
        return [Choice(c, checked=c == self.order.cake_type) for c in CAKE_TYPES]

    @property
    def filling_choices(self) -> list[Choice]:
        return [Choice(f, checked=f in self.order.fillings) for f in FILLINGS]

    def render(self) -> str:
        return self.env.get_template(self.name).render(form=self)
