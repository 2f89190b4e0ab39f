import pytest

from shopsphere.demo_data import DEMO_PRODUCTS, FEATURED_PRODUCTS
from shopsphere.scheduler import ManualClock
from shopsphere.state import AppState


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def state(clock):
    return AppState.create(DEMO_PRODUCTS, FEATURED_PRODUCTS, clock=clock)


def test_cart_actions_route_to_cart(state):
    state.dispatch("cart/add", item=DEMO_PRODUCTS[0], quantity=2)
    state.dispatch("cart/increment", item_id=1)
    assert state.cart.total_items == 3
    state.dispatch("cart/update", item_id=1, quantity=0)
    assert state.cart.total_items == 3
    state.dispatch("cart/remove", item_id=1)
    assert state.cart.is_empty


def test_catalog_actions_route_to_catalog(state):
    state.dispatch("catalog/category", category="electronics")
    state.dispatch("catalog/sort", sort="price-low")
    assert [p.id for p in state.catalog.visible] == [6, 3, 1, 8]
    state.dispatch("catalog/max_price", high=100)
    assert [p.id for p in state.catalog.visible] == [6, 3]
    state.dispatch("catalog/reset")
    assert len(state.catalog.visible) == len(DEMO_PRODUCTS)


def test_showcase_add_goes_through_shared_cart(state, clock):
    state.dispatch("showcase/next")
    state.dispatch("showcase/quantity", value="2")
    state.dispatch("showcase/add")
    assert state.cart.get(102).quantity == 2

    clock.advance(2)
    assert state.tick() == 1
    assert state.showcase.is_added_to_cart is False


def test_user_and_ui_slices(state):
    state.dispatch("user/set", user={"name": "Ada"})
    assert state.user.is_authenticated
    state.dispatch("user/clear")
    assert state.user.user is None

    assert state.ui.theme == "light"
    assert state.dispatch("ui/toggle_theme") == "dark"
    state.dispatch("ui/open_cart")
    assert state.ui.cart_open is True
    state.dispatch("ui/close_cart")
    assert state.ui.cart_open is False


@pytest.mark.parametrize("action", ["cart/explode", "nothing/here", "catalog/", "user/promote"])
def test_unknown_actions_raise(state, action):
    with pytest.raises(ValueError):
        state.dispatch(action)
