from .auth import current_user
from .cart import badge_label
from .state import state_for
from .store_utils import get_cart_count


def storefront(request):
    """Header badge and login state for every page."""
    if not hasattr(request, 'session'):
        return {}
    count = get_cart_count(request)
    return {
        'cart_count': count,
        'cart_badge': badge_label(count),
        'current_user': current_user(state_for(request)),
    }
