# store/state.py
"""
Key/value state used by the storefront.

Values are always strings. JSON goes through get_json/set_json so there is
one place where persisted data is decoded.
"""
import json
import logging

logger = logging.getLogger(__name__)

CART_KEY = 'cartItems'
VOUCHER_KEY = 'os_active_voucher'
USER_KEY = 'os_current_user'
PENDING_ADD_KEY = 'os_pending_add'
POST_LOGIN_REDIRECT_KEY = 'os_post_login_redirect'


class StateStore:
    """Base class; subclasses provide the backing mapping."""

    def _data(self):
        raise NotImplementedError

    def _touch(self):
        pass

    def get(self, key, default=None):
        value = self._data().get(key)
        return default if value is None else value

    def set(self, key, value):
        self._data()[key] = str(value)
        self._touch()

    def remove(self, key):
        if key in self._data():
            del self._data()[key]
            self._touch()

    def clear(self):
        self._data().clear()
        self._touch()

    def get_json(self, key, default=None):
        raw = self.get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Discarding malformed JSON stored under %r", key)
            return default

    def set_json(self, key, value):
        self.set(key, json.dumps(value, default=str))


class MemoryStateStore(StateStore):
    def __init__(self, initial=None):
        self._values = dict(initial or {})

    def _data(self):
        return self._values


class SessionStateStore(StateStore):
    """Wraps request.session so writes end up in the session cookie."""

    def __init__(self, session):
        self.session = session

    def _data(self):
        return self.session

    def _touch(self):
        self.session.modified = True


def state_for(request):
    return SessionStateStore(request.session)
