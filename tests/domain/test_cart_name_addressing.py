"""Tests for the name-based access path into the Cart.

The name path and the Product path address the same items, so a
product added one way can be found or removed the other way.
"""

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from tests import factories


class TestAddByName:

    def test_adds_free_general_product(self):
        cart = Cart()
        assert cart.add_by_name("Laptop") is True
        assert cart.contains_name("Laptop")
        assert cart.contains_product(Product("Laptop", 0, "General"))
        assert cart.subtotal == Money.zero()

    def test_duplicate_name_is_a_no_op(self):
        cart = Cart()
        assert cart.add_by_name("Mouse") is True
        assert cart.add_by_name("Mouse") is False
        assert cart.item_count == 1

    def test_name_already_added_as_product(self):
        cart = factories.cart_with((factories.laptop(), 1))
        assert cart.add_by_name("Laptop") is False
        assert cart.unique_product_count == 1

    @pytest.mark.parametrize("name", [None, ""])
    def test_missing_name_rejected(self, name):
        with pytest.raises(ValidationError):
            Cart().add_by_name(name)

    def test_then_add_product_accumulates(self):
        cart = Cart()
        cart.add_by_name("Keyboard")
        cart.add_product(Product("Keyboard", 0, "General"), 3)
        assert cart.item_count == 4


class TestContainsName:

    def test_case_sensitive(self):
        cart = Cart()
        cart.add_by_name("Laptop")
        assert not cart.contains_name("laptop")
        assert not cart.contains_name("LAPTOP")

    def test_missing_and_none(self):
        assert not Cart().contains_name("Nothing")
        assert not Cart().contains_name(None)


class TestRemoveByName:

    def test_removes_product_added_by_value(self):
        laptop = factories.laptop()
        cart = factories.cart_with((laptop, 3))
        assert cart.remove_by_name("Laptop") is True
        assert not cart.contains_product(laptop)

    def test_missing_returns_false(self):
        assert Cart().remove_by_name("Nonexistent") is False

    def test_none_returns_false(self):
        assert Cart().remove_by_name(None) is False

    def test_first_added_wins_for_shared_names(self):
        older = Product("Pen", 1)
        newer = Product("Pen", 2)
        cart = factories.cart_with((older, 1), (newer, 1))

        assert cart.remove_by_name("Pen") is True
        assert not cart.contains_product(older)
        assert cart.contains_product(newer)

        assert cart.remove_by_name("Pen") is True
        assert cart.is_empty


class TestItemNames:

    def test_one_name_per_product_in_insertion_order(self):
        cart = Cart()
        cart.add_by_name("Laptop")
        cart.add_by_name("Mouse")
        cart.add_product(factories.keyboard(), 5)
        assert cart.item_names() == ["Laptop", "Mouse", "Keyboard"]

    def test_quantity_does_not_repeat_names(self):
        cart = factories.cart_with((factories.laptop(), 5))
        assert cart.item_names() == ["Laptop"]
