from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, Optional, Set, Tuple

TOPPING_PRICE = Decimal("1.00")
TAX_RATE = Decimal("0.07")

RULE = "=" * 41
THIN_RULE = "-" * 41
CENT = Decimal("0.01")


class Size(Enum):
    SMALL = ("Small", Decimal("8.00"))
    MEDIUM = ("Medium", Decimal("12.00"))
    LARGE = ("Large", Decimal("16.00"))
    SUPER = ("Super", Decimal("20.00"))

    def __init__(self, label: str, base_price: Decimal):
        self.label = label
        self.base_price = base_price


class Crust(Enum):
    THIN = "Thin"
    REGULAR = "Regular"
    DEEP_DISH = "Deep-dish"

    @property
    def label(self) -> str:
        return self.value


# Definition order is the catalog order used on receipts.
class Topping(Enum):
    PEPPERONI = "Pepperoni"
    MUSHROOMS = "Mushrooms"
    ONIONS = "Onions"
    BACON = "Bacon"
    PINEAPPLE = "Pineapple"
    OLIVES = "Olives"

    @property
    def label(self) -> str:
        return self.value


DEFAULT_SIZE = next(iter(Size))


def format_money(amount: Decimal) -> str:
    return f"${amount.quantize(CENT, rounding=ROUND_HALF_UP)}"


@dataclass(frozen=True)
class OrderSelection:
    crust: Optional[Crust] = None
    size: Size = DEFAULT_SIZE
    toppings: FrozenSet[Topping] = frozenset()

    def __post_init__(self):
        # Accept any iterable of toppings but keep the snapshot immutable
        object.__setattr__(self, "toppings", frozenset(self.toppings))


@dataclass(frozen=True)
class LineItem:
    label: str
    price: Optional[Decimal] = None  # None for unpriced lines such as the crust


@dataclass(frozen=True)
class Receipt:
    line_items: Tuple[LineItem, ...]
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total: Decimal

    @property
    def tax_label(self) -> str:
        return f"Tax ({self.tax_rate * 100:.0f}%)"

    def rows(self) -> Iterator[LineItem]:
        """Every receipt row in display order, totals included."""
        yield from self.line_items
        yield LineItem("Subtotal", self.subtotal)
        yield LineItem(self.tax_label, self.tax_amount)
        yield LineItem("Total", self.total)

    def summary(self) -> str:
        lines = [RULE, "Pizza Order Receipt", RULE]
        crust, *priced = self.line_items
        lines.append(f"Crust: {crust.label}")
        for item in priced:
            lines.append(f"{item.label}\t\t{format_money(item.price)}")
        lines.append(THIN_RULE)
        lines.append(f"Subtotal:\t\t{format_money(self.subtotal)}")
        lines.append(f"{self.tax_label}:\t\t{format_money(self.tax_amount)}")
        lines.append(RULE)
        lines.append(f"Total:\t\t{format_money(self.total)}")
        return "\n".join(lines)


@dataclass
class OrderForm:
    crust: Optional[Crust] = None
    size: Size = DEFAULT_SIZE
    toppings: Set[Topping] = field(default_factory=set)
    receipt: Optional[Receipt] = None

    def select_crust(self, crust: Crust):
        self.crust = crust

    def select_size(self, size: Size):
        self.size = size

    def add_toppings(self, toppings: Iterable[Topping]):
        self.toppings.update(toppings)

    def remove_toppings(self, toppings: Iterable[Topping]):
        self.toppings.difference_update(toppings)

    def selection(self) -> OrderSelection:
        return OrderSelection(crust=self.crust, size=self.size, toppings=self.toppings)

    def clear(self):
        self.crust = None
        self.size = DEFAULT_SIZE
        self.toppings.clear()
        self.receipt = None

    def describe(self) -> str:
        parts = [f"Size: {self.size.label} ({format_money(self.size.base_price)})"]
        parts.append(f"Crust: {self.crust.label if self.crust else 'not selected'}")
        chosen = [t.label for t in Topping if t in self.toppings]
        parts.append(f"Toppings: {', '.join(chosen) if chosen else 'none'}")
        return " | ".join(parts)
