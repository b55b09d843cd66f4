"""
Pytest configuration and fixtures.
"""
from datetime import date, datetime
from decimal import Decimal

import pytest
from django.core.cache import cache

from apps.menu.domain.entities.catalog import Catalog
from apps.menu.domain.entities.food_item import FoodItem
from apps.menu.domain.value_objects.money import Money
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.entities.promotion import Promotion
from apps.orders.domain.exceptions import OrderSubmissionError
from apps.orders.domain.repositories.order_gateway import OrderGateway
from apps.orders.domain.repositories.promotion_repository import PromotionRepository
from apps.orders.domain.services.promotion_matcher import PromotionSelection
from apps.orders.domain.value_objects.discount_kind import DiscountKind
from apps.reservations.domain.exceptions import ReservationSubmissionError
from apps.reservations.domain.repositories.reservation_gateway import ReservationGateway

TODAY = date(2026, 10, 19)
NOW = datetime(2026, 10, 19, 10, 0)


class FakeOrderGateway(OrderGateway):
    """Records submitted payloads; fails with `error` when one is set."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else {'MaDonHang': 501}
        self.error = error
        self.payloads = []

    def submit(self, payload: dict) -> dict:
        self.payloads.append(payload)
        if self.error:
            raise self.error
        return self.response


class FakeReservationGateway(ReservationGateway):
    def __init__(self, response=None, error=None):
        self.response = response if response is not None else {'maDatBan': 77, 'tenBan': 'Bàn 4'}
        self.error = error
        self.payloads = []

    def submit(self, payload: dict) -> dict:
        self.payloads.append(payload)
        if self.error:
            raise self.error
        return self.response


class FakePromotionRepository(PromotionRepository):
    def __init__(self, promotions):
        self.promotions = list(promotions)

    def find_active(self, today: date):
        return [promotion for promotion in self.promotions if promotion.is_active_on(today)]


@pytest.fixture(autouse=True)
def clear_cache():
    """Every test starts with an empty Django cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def pho():
    return FoodItem(id=1, name="Phở bò", price=Money(amount=Decimal('50000')), category="Món chính", image="pho.jpg")


@pytest.fixture
def tra_da():
    return FoodItem(id=2, name="Trà đá", price=Money(amount=Decimal('30000')), category="Đồ uống", image="tra.jpg")


@pytest.fixture
def catalog(pho, tra_da):
    return Catalog([
        pho,
        tra_da,
        FoodItem(id=3, name="Chè đậu", price=Money(amount=Decimal('15000.5')), category="Tráng miệng"),
    ])


@pytest.fixture
def cart():
    """Cart holding two Phở bò and one Trà đá: subtotal 130.000 ₫."""
    cart = Cart.create()
    cart.increment(1)
    cart.increment(1)
    cart.increment(2)
    return cart


@pytest.fixture
def percent_promotion():
    return Promotion(
        id=10,
        name="Giảm 10%",
        kind=DiscountKind.PERCENTAGE,
        value=Decimal('10'),
        start_date=date(2026, 10, 1),
        end_date=date(2026, 10, 31),
        code="GIAM10",
    )


@pytest.fixture
def fixed_promotion():
    return Promotion(
        id=11,
        name="Giảm 200k",
        kind=DiscountKind.FIXED_AMOUNT,
        value=Decimal('200000'),
        start_date=date(2026, 10, 19),
        end_date=date(2026, 10, 19),
        code="BIG200",
    )


@pytest.fixture
def expired_promotion():
    return Promotion(
        id=12,
        name="Hè 2026",
        kind=DiscountKind.PERCENTAGE,
        value=Decimal('20'),
        start_date=date(2026, 6, 1),
        end_date=date(2026, 8, 31),
        code="SUMMER",
    )


@pytest.fixture
def promotions(percent_promotion, fixed_promotion, expired_promotion):
    return [percent_promotion, fixed_promotion, expired_promotion]


@pytest.fixture
def promotion_repository(promotions):
    return FakePromotionRepository(promotions)


@pytest.fixture
def selection():
    return PromotionSelection()


@pytest.fixture
def order_gateway():
    return FakeOrderGateway()


@pytest.fixture
def failing_order_gateway():
    return FakeOrderGateway(error=OrderSubmissionError("Món ăn đã hết", status_code=400))


@pytest.fixture
def reservation_gateway():
    return FakeReservationGateway()


@pytest.fixture
def failing_reservation_gateway():
    return FakeReservationGateway(error=ReservationSubmissionError(status_code=409))


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def now():
    return NOW
