# store/auth.py
"""
Login here is only a flag in the shopper's state. Actions that need it
(add to cart, placing an order) check the flag first; a blocked add is
stored as a pending intent and replayed once the shopper has logged in.
"""
import logging

from .cart import CartItem, CartStore
from .exceptions import LoginError
from .state import PENDING_ADD_KEY, POST_LOGIN_REDIRECT_KEY, USER_KEY
from .vouchers import VoucherResolver

logger = logging.getLogger(__name__)


def current_user(state):
    return state.get(USER_KEY) or None


def is_logged_in(state):
    return bool(current_user(state))


def log_in(state, username):
    username = (username or '').strip()
    if not username:
        raise LoginError("Please enter your name or email to sign in.")
    state.set(USER_KEY, username)
    logger.info("Shopper %s signed in", username)
    return username


def log_out(state):
    user = current_user(state)
    state.remove(USER_KEY)
    CartStore(state).clear()
    VoucherResolver(state).set_active_code(None)
    logger.info("Shopper %s signed out, cart cleared", user or '(anonymous)')


def defer_add(state, item, return_to=None):
    state.set_json(PENDING_ADD_KEY, item.to_dict())
    if return_to:
        state.set(POST_LOGIN_REDIRECT_KEY, return_to)


def pop_post_login_redirect(state):
    url = state.get(POST_LOGIN_REDIRECT_KEY)
    state.remove(POST_LOGIN_REDIRECT_KEY)
    return url


def replay_pending_add(state, cart=None):
    """
    Add the pending item to the cart if the shopper is logged in.
    The pending entry is removed whenever it is consumed or unreadable,
    so an intent is never added twice.
    """
    if state.get(PENDING_ADD_KEY) is None or not is_logged_in(state):
        return None
    data = state.get_json(PENDING_ADD_KEY)
    try:
        item = CartItem.from_dict(data)
    except ValueError as e:
        logger.warning("Dropping unusable pending add: %s", e)
        state.remove(PENDING_ADD_KEY)
        return None
    (cart or CartStore(state)).add_item(item)
    state.remove(PENDING_ADD_KEY)
    logger.info("Replayed pending add of %s for %s", item.id, current_user(state))
    return item
