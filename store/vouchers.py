# store/vouchers.py
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple, Optional

from .exceptions import VoucherError
from .state import VOUCHER_KEY

logger = logging.getLogger(__name__)

AMOUNT = 'amount'
PERCENT = 'percent'


class Voucher(NamedTuple):
    code: str
    type: str
    min_spend: Decimal
    description: str = ''
    amount: Decimal = Decimal('0.00')
    percent: int = 0


VOUCHERS = {
    'OFFI2025': Voucher(
        code='OFFI2025',
        type=AMOUNT,
        amount=Decimal('100.00'),
        min_spend=Decimal('500.00'),
        description='₱100 OFF min. spend ₱500',
    ),
    'BULK10': Voucher(
        code='BULK10',
        type=PERCENT,
        percent=10,
        min_spend=Decimal('2000.00'),
        description='10% OFF orders above ₱2,000',
    ),
}


def normalize_code(code):
    return str(code or '').strip().upper()


def get_voucher(code) -> Optional[Voucher]:
    return VOUCHERS.get(normalize_code(code))


def voucher_discount(voucher: Optional[Voucher], subtotal: Decimal) -> Decimal:
    """Discount the voucher gives on ``subtotal``; zero when not eligible."""
    if voucher is None or subtotal <= 0:
        return Decimal('0.00')
    if voucher.min_spend and subtotal < voucher.min_spend:
        return Decimal('0.00')
    if voucher.type == AMOUNT:
        return min(voucher.amount, subtotal)
    if voucher.type == PERCENT:
        discount = subtotal * Decimal(voucher.percent) / Decimal(100)
        return min(discount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP), subtotal)
    return Decimal('0.00')


def calculate_discount(cart, code) -> Decimal:
    subtotal = sum((item.price * item.quantity for item in cart), Decimal('0.00'))
    return voucher_discount(get_voucher(code), subtotal)


class VoucherResolver:
    """Looks up voucher codes and keeps the one active code in state."""

    def __init__(self, state):
        self.state = state

    def resolve(self, code):
        return get_voucher(code)

    def active_code(self):
        return self.state.get(VOUCHER_KEY) or None

    def set_active_code(self, code):
        if code:
            self.state.set(VOUCHER_KEY, code)
        else:
            self.state.remove(VOUCHER_KEY)

    def clear_active(self):
        self.state.remove(VOUCHER_KEY)
        logger.info("Active voucher removed")

    def apply(self, code, cart):
        """
        Validate ``code`` against the current cart and make it active.
        Raises VoucherError without touching the stored code on rejection.
        """
        code = normalize_code(code)
        if not code:
            raise VoucherError("Enter a voucher code")
        voucher = self.resolve(code)
        if voucher is None:
            raise VoucherError("Invalid voucher code")
        if calculate_discount(cart, code) <= 0:
            raise VoucherError("Voucher does not meet requirements")
        self.set_active_code(voucher.code)
        logger.info("Voucher %s applied", voucher.code)
        return voucher
