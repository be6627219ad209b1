"""Shared pytest fixtures for store tests."""

from decimal import Decimal

import pytest
from django.conf import settings
from django.urls import reverse

from store.cart import CartItem, CartStore
from store.state import MemoryStateStore, SessionStateStore
from store.vouchers import VoucherResolver


@pytest.fixture
def state():
    """Empty in-memory shopper state."""
    return MemoryStateStore()


@pytest.fixture
def cart(state):
    return CartStore(state)


@pytest.fixture
def resolver(state):
    return VoucherResolver(state)


@pytest.fixture
def make_item():
    """Build a CartItem with sensible defaults."""
    def _make(id="A", price="100.00", quantity=1, name=None, image=""):
        return CartItem(
            id=id,
            name=name or f"Product {id}",
            price=Decimal(price),
            image=image,
            quantity=quantity,
        )
    return _make


@pytest.fixture
def logged_in_client(client):
    """Test client that has already signed in."""
    client.post(reverse("login"), {"username": "maria@example.com"})
    return client


def session_cart(client):
    """Cart items currently stored in the client's session cookie."""
    return CartStore(SessionStateStore(client.session)).get_items()


def session_state(client):
    return SessionStateStore(client.session)


def write_session(client, **values):
    """Store raw values in the client's session cookie; None removes a key."""
    session = client.session
    for key, value in values.items():
        if value is None:
            session.pop(key, None)
        else:
            session[key] = value
    session.save()
    client.cookies[settings.SESSION_COOKIE_NAME] = session.session_key
