"""Unit tests for the Cart aggregate."""

from decimal import Decimal

import pytest

from artshop.domain.model.cart import Cart, CartItemSnapshot, CartLineItem
from artshop.domain.model.value_objects import Money, Quantity


def _snapshot(product_id: str = "1", name: str = "Blue Abstract", price: str = "100") -> CartItemSnapshot:
    return CartItemSnapshot(id=product_id, name=name, price=Money.of(price), image=f"/img/{product_id}.jpg")


class TestAdd:

    def test_new_product_gets_quantity_one(self):
        cart = Cart()
        cart.add(_snapshot())
        assert len(cart.items) == 1
        assert cart.items[0].quantity.value == 1

    @pytest.mark.parametrize("times", [1, 2, 5])
    def test_repeated_adds_keep_one_line(self, times):
        cart = Cart()
        for _ in range(times):
            cart.add(_snapshot())
        assert len(cart.items) == 1
        assert cart.items[0].quantity.value == times

    def test_insertion_order_is_display_order(self):
        cart = Cart()
        cart.add(_snapshot("1"))
        cart.add(_snapshot("2"))
        cart.add(_snapshot("1"))
        assert [i.id for i in cart.items] == ["1", "2"]

    def test_re_add_keeps_original_snapshot(self):
        cart = Cart()
        cart.add(_snapshot(price="100", name="Old name"))
        cart.add(_snapshot(price="999", name="New name"))
        line = cart.items[0]
        assert line.price == Money.of("100")
        assert line.name == "Old name"
        assert line.quantity.value == 2

    def test_removed_then_re_added_goes_to_the_end(self):
        cart = Cart()
        cart.add(_snapshot("1"))
        cart.add(_snapshot("2"))
        cart.remove("1")
        cart.add(_snapshot("1"))
        assert [i.id for i in cart.items] == ["2", "1"]


class TestRemoveAndUpdate:

    def test_remove_present(self):
        cart = Cart()
        cart.add(_snapshot())
        assert cart.remove("1") is True
        assert cart.is_empty

    def test_remove_absent_is_noop(self):
        cart = Cart()
        cart.add(_snapshot())
        assert cart.remove("42") is False
        assert len(cart.items) == 1

    def test_update_sets_absolute_quantity(self):
        cart = Cart()
        cart.add(_snapshot())
        cart.add(_snapshot())
        assert cart.update_quantity("1", 7) is True
        assert cart.find("1").quantity.value == 7

    @pytest.mark.parametrize("quantity", [0, -5])
    def test_update_below_one_is_ignored(self, quantity):
        cart = Cart()
        cart.add(_snapshot())
        cart.add(_snapshot())
        assert cart.update_quantity("1", quantity) is False
        assert cart.find("1").quantity.value == 2

    def test_update_unknown_id_is_noop(self):
        cart = Cart()
        assert cart.update_quantity("1", 3) is False
        assert cart.is_empty

    def test_clear(self):
        cart = Cart()
        cart.add(_snapshot("1"))
        cart.add(_snapshot("2"))
        cart.clear()
        assert cart.items == []


class TestAggregates:

    def test_empty_cart(self):
        cart = Cart()
        assert cart.count == 0
        assert cart.total == Money.zero()

    def test_count_and_total(self):
        cart = Cart()
        cart.add(_snapshot("1", price="100"))
        cart.add(_snapshot("2", price="250.50"))
        cart.update_quantity("2", 3)
        assert cart.count == 4
        assert cart.total.amount == Decimal("100") + Decimal("250.50") * 3

    def test_line_total(self):
        cart = Cart()
        cart.add(_snapshot(price="12.25"))
        cart.add(_snapshot(price="12.25"))
        assert cart.items[0].line_total == Money.of("24.50")


class TestConstruction:

    def test_repeated_ids_fold_into_the_first_line(self):
        cart = Cart([
            CartLineItem(id="1", name="First", price=Money.of("100"), quantity=Quantity(2)),
            CartLineItem(id="2", name="Other", price=Money.of("50"), quantity=Quantity(1)),
            CartLineItem(id="1", name="Later", price=Money.of("900"), quantity=Quantity(3)),
        ])

        assert [(i.id, i.name, i.quantity.value) for i in cart.items] == [("1", "First", 5), ("2", "Other", 1)]
        cart.add(_snapshot("1"))
        assert cart.find("1").quantity.value == 6
