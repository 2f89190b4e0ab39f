import pytest

from shopsphere.cart import Cart, money
from shopsphere.notifications import NotificationCenter
from shopsphere.schemas import CatalogItem


@pytest.fixture
def notifier():
    return NotificationCenter()


@pytest.fixture
def cart(notifier):
    return Cart(notifier)


def _item(id=1, price=10.0, name="Widget"):
    return CatalogItem(id=id, name=name, price=price, images=[f"img-{id}.jpg"])


def test_add_merges_lines_by_id(cart):
    cart.add_item(_item(), 2)
    cart.add_item(_item(), 3)
    assert len(cart.lines) == 1
    assert cart.get(1).quantity == 5
    assert cart.total_items == 5


def test_merge_does_not_clamp_quantity(cart):
    cart.add_item(_item(), 8)
    cart.add_item(_item(), 5)
    assert cart.get(1).quantity == 13


def test_totals_follow_lines(cart):
    cart.add_item(_item(1, 10.0), 2)
    cart.add_item(_item(2, 5.5, "Gadget"), 1)
    assert cart.total_items == 3
    assert cart.subtotal == pytest.approx(25.5)
    summary = cart.summary()
    assert summary["total"] == 25.5
    assert summary["shipping"] == "Calculated at checkout"
    assert summary["badge_count"] == 3


def test_lines_snapshot_the_item(cart):
    source = _item(price=10.0)
    cart.add_item(source)
    source.price = 99.0
    assert cart.get(1).item.price == 10.0
    assert cart.subtotal == 10.0


def test_update_below_one_is_a_no_op(cart):
    cart.add_item(_item(), 3)
    assert cart.update_quantity(1, 0) is False
    assert cart.get(1).quantity == 3
    assert cart.update_quantity(1, 7) is True
    assert cart.get(1).quantity == 7


def test_decrement_stops_at_one(cart):
    cart.add_item(_item())
    cart.decrement(1)
    assert cart.get(1).quantity == 1
    cart.increment(1)
    assert cart.get(1).quantity == 2


def test_remove_missing_id_leaves_totals(cart, notifier):
    cart.add_item(_item(), 2)
    notifier.drain()
    assert cart.remove_item(42) is False
    assert cart.total_items == 2
    assert [t["message"] for t in notifier.drain()] == ["Item removed from cart"]


def test_clear_empties_cart(cart):
    cart.add_item(_item())
    cart.clear()
    assert cart.is_empty
    assert cart.subtotal == 0
    assert cart.badge_count is None


def test_add_emits_success_toast(cart, notifier):
    cart.add_item(_item(name="Lamp"))
    toasts = notifier.drain()
    assert toasts[0]["level"] == "success"
    assert toasts[0]["message"] == "Added Lamp to cart!"
    assert toasts[0]["position"] == "bottom-right"
    assert toasts[0]["auto_close_ms"] == 2000


def test_line_defaults_to_item_thumbnail(cart):
    line = cart.add_item(_item(id=3))
    assert line.image == "img-3.jpg"
    assert line.to_dict()["line_total"] == 10.0


def test_money_formats_two_decimals():
    assert money(5) == "$5.00"
    assert money(129.999) == "$130.00"
