"""Shared pytest fixtures for engine tests.

Provides small factories for products, order lines, delivery info and
orders so tests only spell out the fields they care about.

Usage:
    def test_fee(make_line, hanoi_delivery):
        lines = [make_line(weight_kg="1.0", quantity=2)]
"""

import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

import pytest

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from domain.orders.models import DeliveryInfo, Order, OrderLine, Product
from domain.shipping.tiering import FeeSchedule
from domain.validation.models import ValidationContext


FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fee_schedule():
    """Default pricing constants (VND)."""
    return FeeSchedule()


@pytest.fixture
def validation_context():
    """Validation thresholds with the clock pinned to FIXED_NOW."""
    return ValidationContext(now=FIXED_NOW)


@pytest.fixture
def make_product():
    def _make(
        title="Vinyl Record",
        weight_kg="1.0",
        dimensions_cm=None,
        price="50000",
        product_id=None,
    ):
        return Product(
            product_id=product_id or f"P-{title.replace(' ', '-').upper()}",
            title=title,
            weight_kg=Decimal(weight_kg),
            dimensions_cm=dimensions_cm,
            price=Decimal(price),
            stock=10,
        )
    return _make


@pytest.fixture
def make_line(make_product):
    def _make(
        weight_kg="1.0",
        quantity=1,
        price="50000",
        eligible_for_rush=False,
        dimensions_cm=None,
        title="Vinyl Record",
    ):
        product = make_product(
            title=title, weight_kg=weight_kg, dimensions_cm=dimensions_cm, price=price
        )
        return OrderLine(
            product=product,
            quantity=quantity,
            price_at_order_time=Decimal(price),
            eligible_for_rush=eligible_for_rush,
        )
    return _make


@pytest.fixture
def make_delivery():
    def _make(province_city="Hanoi", rush_requested=False, **overrides):
        values = dict(
            recipient_name="Nguyen Van A",
            phone_number="0912345678",
            province_city=province_city,
            address="12 Trang Tien, Hoan Kiem",
            email="a.nguyen@example.com",
            rush_requested=rush_requested,
            delivery_method="RUSH" if rush_requested else "STANDARD",
        )
        values.update(overrides)
        return DeliveryInfo(**values)
    return _make


@pytest.fixture
def hanoi_delivery(make_delivery):
    return make_delivery("Hanoi")


@pytest.fixture
def hcm_delivery(make_delivery):
    return make_delivery("Ho Chi Minh City")


@pytest.fixture
def danang_delivery(make_delivery):
    return make_delivery("Da Nang")


@pytest.fixture
def make_order(make_line, make_delivery):
    """Order whose stored totals are consistent with its lines (VAT 10%)."""
    def _make(lines=None, delivery=None, delivery_fee="22000", order_date=None, order_id="ORD-1001"):
        lines = lines if lines is not None else [make_line(quantity=2)]
        delivery = delivery if delivery is not None else make_delivery()
        subtotal = sum((line.line_total for line in lines), Decimal("0"))
        incl_vat = subtotal + subtotal * Decimal("0.10")
        fee = Decimal(delivery_fee)
        return Order(
            order_id=order_id,
            lines=lines,
            delivery_info=delivery,
            order_date=order_date or FIXED_NOW - timedelta(days=1),
            total_price_excl_vat=subtotal,
            total_price_incl_vat=incl_vat,
            delivery_fee=fee,
            total_amount=incl_vat + fee,
        )
    return _make
