"""Tests for voucher lookup and the active voucher code."""

from decimal import Decimal

import pytest

from store.exceptions import VoucherError
from store.state import VOUCHER_KEY
from store.vouchers import PERCENT, calculate_discount, get_voucher


class TestResolve:
    @pytest.mark.parametrize("code", ["OFFI2025", "offi2025", "  Offi2025 "])
    def test_code_lookup_is_case_and_space_insensitive(self, resolver, code):
        assert resolver.resolve(code).code == "OFFI2025"

    @pytest.mark.parametrize("code", ["", None, "NOPE", "BULK"])
    def test_unknown_codes_resolve_to_none(self, resolver, code):
        assert resolver.resolve(code) is None

    def test_bulk10_is_percent_voucher(self):
        voucher = get_voucher("bulk10")
        assert voucher.type == PERCENT
        assert voucher.percent == 10
        assert voucher.min_spend == Decimal("2000.00")


class TestActiveCode:
    def test_no_active_code_by_default(self, resolver):
        assert resolver.active_code() is None

    def test_set_and_clear(self, resolver, state):
        resolver.set_active_code("BULK10")
        assert resolver.active_code() == "BULK10"
        assert state.get(VOUCHER_KEY) == "BULK10"
        resolver.clear_active()
        assert resolver.active_code() is None

    def test_setting_none_removes(self, resolver):
        resolver.set_active_code("BULK10")
        resolver.set_active_code(None)
        assert resolver.active_code() is None

    def test_set_does_not_check_eligibility(self, resolver):
        resolver.set_active_code("BULK10")
        assert resolver.active_code() == "BULK10"


class TestApply:
    def test_apply_eligible_code(self, resolver, make_item):
        voucher = resolver.apply(" offi2025 ", [make_item(price="600.00")])
        assert voucher.code == "OFFI2025"
        assert resolver.active_code() == "OFFI2025"

    @pytest.mark.parametrize("code,message", [
        ("", "Enter a voucher code"),
        ("FREESTUFF", "Invalid voucher code"),
        ("OFFI2025", "Voucher does not meet requirements"),
    ])
    def test_rejections_leave_stored_code_untouched(self, resolver, make_item, code, message):
        resolver.set_active_code("BULK10")
        with pytest.raises(VoucherError, match=message):
            resolver.apply(code, [make_item(price="100.00")])
        assert resolver.active_code() == "BULK10"


class TestDiscount:
    def test_amount_voucher_below_min_spend(self, make_item):
        assert calculate_discount([make_item(price="100.00", quantity=2)], "OFFI2025") == 0

    def test_amount_voucher_at_min_spend(self, make_item):
        assert calculate_discount([make_item(price="500.00")], "OFFI2025") == Decimal("100.00")

    def test_percent_voucher(self, make_item):
        assert calculate_discount([make_item(price="2500.00")], "BULK10") == Decimal("250.00")

    def test_percent_voucher_rounds_to_cents(self, make_item):
        assert calculate_discount([make_item(price="2000.05")], "BULK10") == Decimal("200.01")

    def test_empty_cart_has_no_discount(self):
        assert calculate_discount([], "OFFI2025") == 0

    def test_unknown_code_has_no_discount(self, make_item):
        assert calculate_discount([make_item(price="5000.00")], "NOPE") == 0
