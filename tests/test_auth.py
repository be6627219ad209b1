"""Tests for the login flag and deferred add-to-cart replay."""

import pytest

from store.auth import (
    current_user,
    defer_add,
    is_logged_in,
    log_in,
    log_out,
    pop_post_login_redirect,
    replay_pending_add,
)
from store.cart import CartStore
from store.exceptions import LoginError
from store.state import PENDING_ADD_KEY
from store.vouchers import VoucherResolver


def test_logged_out_by_default(state):
    assert not is_logged_in(state)
    assert current_user(state) is None


def test_log_in_trims_name(state):
    log_in(state, "  maria  ")
    assert is_logged_in(state)
    assert current_user(state) == "maria"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_login_is_rejected(state, name):
    with pytest.raises(LoginError):
        log_in(state, name)
    assert not is_logged_in(state)


def test_log_out_clears_cart_and_voucher(state, cart, make_item):
    log_in(state, "maria")
    cart.add_item(make_item("A", price="600"))
    VoucherResolver(state).set_active_code("OFFI2025")

    log_out(state)

    assert not is_logged_in(state)
    assert cart.get_items() == []
    assert VoucherResolver(state).active_code() is None


class TestPendingAdd:
    def test_not_replayed_while_logged_out(self, state, cart, make_item):
        defer_add(state, make_item("A"), return_to="/catalog/")
        assert replay_pending_add(state, cart) is None
        assert cart.get_items() == []
        assert state.get(PENDING_ADD_KEY) is not None

    def test_replayed_exactly_once_after_login(self, state, cart, make_item):
        defer_add(state, make_item("A", quantity=2))
        log_in(state, "maria")

        replayed = replay_pending_add(state, cart)
        assert replayed.id == "A"
        assert replay_pending_add(state, cart) is None
        assert [(i.id, i.quantity) for i in cart.get_items()] == [("A", 2)]

    def test_replay_merges_with_existing_line(self, state, cart, make_item):
        log_in(state, "maria")
        cart.add_item(make_item("A"))
        defer_add(state, make_item("A"))
        replay_pending_add(state)
        assert CartStore(state).get_items()[0].quantity == 2

    def test_malformed_pending_add_is_discarded(self, state, cart):
        log_in(state, "maria")
        state.set(PENDING_ADD_KEY, "{broken")
        assert replay_pending_add(state, cart) is None
        assert state.get(PENDING_ADD_KEY) is None
        assert cart.get_items() == []

    def test_post_login_redirect_is_popped_once(self, state, make_item):
        defer_add(state, make_item("A"), return_to="/cart/")
        assert pop_post_login_redirect(state) == "/cart/"
        assert pop_post_login_redirect(state) is None
