from decimal import Decimal
from itertools import combinations

import pytest

from order_state import Crust, OrderSelection, Size, Topping
from pricing import NoCrustSelected, ValidationError, price


@pytest.mark.parametrize("size", list(Size))
def test_plain_pizza_costs_base_price_plus_tax(size):
    receipt = price(OrderSelection(crust=Crust.THIN, size=size))
    assert receipt.subtotal == size.base_price
    assert round(receipt.tax_amount, 2) == round(size.base_price * Decimal("0.07"), 2)
    assert receipt.total == receipt.subtotal + receipt.tax_amount


@pytest.mark.parametrize("count", range(1, len(Topping) + 1))
def test_each_topping_adds_one_dollar(count):
    for toppings in combinations(Topping, count):
        receipt = price(OrderSelection(crust=Crust.REGULAR, size=Size.LARGE, toppings=toppings))
        assert receipt.subtotal == Size.LARGE.base_price + Decimal("1.00") * len(toppings)


@pytest.mark.parametrize("size", list(Size))
def test_missing_crust_is_rejected(size):
    for toppings in [(), (Topping.OLIVES,), tuple(Topping)]:
        with pytest.raises(NoCrustSelected):
            price(OrderSelection(size=size, toppings=toppings))


def test_no_crust_is_a_validation_error():
    with pytest.raises(ValidationError, match="Please select a crust type."):
        price(OrderSelection())


def test_pricing_is_repeatable():
    selection = OrderSelection(crust=Crust.DEEP_DISH, size=Size.SUPER, toppings={Topping.BACON})
    assert price(selection) == price(selection)


def test_medium_regular_with_pepperoni_and_bacon():
    receipt = price(OrderSelection(
        crust=Crust.REGULAR, size=Size.MEDIUM, toppings={Topping.PEPPERONI, Topping.BACON}))
    assert receipt.subtotal == Decimal("14.00")
    assert receipt.tax_amount == Decimal("0.98")
    assert receipt.total == Decimal("14.98")


def test_small_thin_without_toppings():
    receipt = price(OrderSelection(crust=Crust.THIN, size=Size.SMALL))
    assert receipt.subtotal == Decimal("8.00")
    assert receipt.tax_amount == Decimal("0.56")
    assert receipt.total == Decimal("8.56")


def test_super_with_olives_and_no_crust():
    with pytest.raises(NoCrustSelected):
        price(OrderSelection(size=Size.SUPER, toppings={Topping.OLIVES}))


def test_line_items_follow_catalog_order():
    receipt = price(OrderSelection(
        crust=Crust.THIN, size=Size.MEDIUM,
        toppings=[Topping.OLIVES, Topping.PEPPERONI, Topping.ONIONS]))
    labels = [item.label for item in receipt.line_items]
    assert labels == ["Thin", "Size: Medium", "Pepperoni", "Onions", "Olives"]
    assert receipt.line_items[0].price is None
    assert receipt.line_items[1].price == Decimal("12.00")
    assert all(item.price == Decimal("1.00") for item in receipt.line_items[2:])
