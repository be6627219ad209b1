# store/store_utils.py
from decimal import Decimal, InvalidOperation

from django.conf import settings

from .cart import CartStore
from .state import state_for
from .totals import compute_totals
from .vouchers import VoucherResolver


def get_cart(request):
    return CartStore(state_for(request))


def get_cart_count(request):
    """
    Returns the total item count in the session cart.
    """
    return get_cart(request).count()


def get_totals(request, items=None):
    state = state_for(request)
    if items is None:
        items = CartStore(state).get_items()
    return compute_totals(items, VoucherResolver(state).active_code())


def format_price(value):
    """₱ 1,234.50 style amount; anything unparseable shows as zero."""
    symbol = getattr(settings, 'STORE_CURRENCY_SYMBOL', '₱')
    try:
        amount = Decimal(str(value or 0)).quantize(Decimal('0.01'))
    except InvalidOperation:
        amount = Decimal('0.00')
    return f"{symbol} {amount:,.2f}"


def parse_quantity(raw, default=1):
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return default
