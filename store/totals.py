# store/totals.py
from decimal import Decimal
from typing import NamedTuple, Optional

from django.conf import settings

from .vouchers import get_voucher, voucher_discount

DEFAULT_SHIPPING_FEE = Decimal('150.00')
ZERO = Decimal('0.00')


class Totals(NamedTuple):
    subtotal: Decimal
    discount: Decimal
    shipping: Decimal
    total: Decimal
    item_count: int
    applied_voucher: Optional[str] = None

    def as_dict(self):
        return {
            'subtotal': str(self.subtotal),
            'discount': str(self.discount),
            'shipping': str(self.shipping),
            'total': str(self.total),
            'item_count': self.item_count,
            'applied_voucher': self.applied_voucher,
        }


def shipping_fee_setting():
    return Decimal(str(getattr(settings, 'STORE_SHIPPING_FEE', DEFAULT_SHIPPING_FEE)))


def compute_totals(cart, active_code=None, shipping_fee=None):
    """
    Derive the cart summary from the items and the active voucher code.

    Nothing here reads or writes state, so the same inputs always give the
    same Totals. Shipping is only charged on a non-empty subtotal and the
    total never goes below the shipping fee.
    """
    if shipping_fee is None:
        shipping_fee = shipping_fee_setting()

    subtotal = sum((item.price * item.quantity for item in cart), ZERO).quantize(Decimal('0.01'))
    item_count = sum(item.quantity for item in cart)

    if subtotal <= 0:
        discount = ZERO
        shipping = ZERO
    else:
        discount = voucher_discount(get_voucher(active_code), subtotal) if active_code else ZERO
        shipping = Decimal(shipping_fee).quantize(Decimal('0.01'))

    total = max(ZERO, subtotal - discount) + shipping
    return Totals(
        subtotal=subtotal,
        discount=discount,
        shipping=shipping,
        total=total.quantize(Decimal('0.01')),
        item_count=item_count,
        applied_voucher=active_code or None,
    )
