from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured
import logging

logger = logging.getLogger(__name__)


class StoreConfig(AppConfig):
    name = "store"

    def ready(self):
        """
        On startup, check the voucher table and shipping fee are usable.
        A broken table is a deploy error, so fail loudly.
        """
        from .totals import shipping_fee_setting
        from .vouchers import AMOUNT, PERCENT, VOUCHERS

        for key, voucher in VOUCHERS.items():
            if key != voucher.code.upper():
                raise ImproperlyConfigured(f"Voucher key {key!r} does not match code {voucher.code!r}")
            if voucher.type not in (AMOUNT, PERCENT):
                raise ImproperlyConfigured(f"Voucher {key} has unknown type {voucher.type!r}")
            if voucher.type == PERCENT and not 0 <= voucher.percent <= 100:
                raise ImproperlyConfigured(f"Voucher {key} percent must be 0-100")

        fee = shipping_fee_setting()
        if fee < 0:
            raise ImproperlyConfigured("STORE_SHIPPING_FEE cannot be negative")
        logger.info("Store ready: %d voucher(s), shipping fee %s", len(VOUCHERS), fee)
