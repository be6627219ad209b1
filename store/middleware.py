# store/middleware.py
from django.contrib import messages
from django.utils.deprecation import MiddlewareMixin

from .auth import replay_pending_add
from .cart import CartStore
from .state import state_for


class PendingCartMiddleware(MiddlewareMixin):
    """
    Runs on every page load: tidies stored image URLs and, once the shopper
    is signed in, adds the item they tried to add while signed out.
    Must come after SessionMiddleware and MessageMiddleware.
    """
    def process_request(self, request):
        state = state_for(request)
        cart = CartStore(state)
        cart.migrate_images()
        item = replay_pending_add(state, cart)
        if item is not None:
            messages.success(request, "Added item to cart after sign-in")
