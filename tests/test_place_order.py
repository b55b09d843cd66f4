"""
Place order use case tests.
"""
from decimal import Decimal

import pytest

from apps.menu.domain.value_objects.money import Money
from apps.orders.application.dtos import PlaceOrderDTO
from apps.orders.application.use_cases import PlaceOrderUseCase
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.events import OrderPlaced
from apps.orders.domain.exceptions import (
    EmptyCartError,
    MissingShippingInfoError,
    OrderSubmissionError,
)
from apps.orders.domain.repositories.order_gateway import OrderGateway
from apps.orders.domain.services.pricing_calculator import PricingCalculator
from apps.orders.domain.value_objects.fulfillment_mode import FulfillmentMode
from apps.orders.domain.value_objects.payment_method import PaymentMethod
from shared.domain import SubmissionInProgressError


def make_use_case(cart, catalog, selection, gateway):
    return PlaceOrderUseCase(
        cart=cart,
        catalog_provider=lambda: catalog,
        promotions=selection,
        order_gateway=gateway,
        calculator=PricingCalculator(Decimal('20000')),
    )


@pytest.fixture
def delivery_form():
    return PlaceOrderDTO(
        phone_number="0901234567",
        address="12 Lê Lợi, Quận 1",
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
        mode=FulfillmentMode.DELIVERY,
    )


class TestPlaceOrder:
    def test_submits_payload_and_clears_cart(self, cart, catalog, selection, order_gateway, delivery_form):
        use_case = make_use_case(cart, catalog, selection, order_gateway)

        result = use_case.execute(delivery_form)

        assert result.success
        assert result.data.order_id == 501
        assert result.data.total == Money(amount=Decimal('150000'))
        assert result.data.payment_qr_url is None
        assert order_gateway.payloads == [{
            'ChiTietList': [{'MaMon': 1, 'SoLuong': 2}, {'MaMon': 2, 'SoLuong': 1}],
            'shippingInfo': {'DiaChi': "12 Lê Lợi, Quận 1", 'SoDienThoai': "0901234567"},
            'paymentMethod': "cod",
            'PromotionId': None,
            'DiscountAmount': 0,
        }]
        assert cart.is_empty
        assert not use_case.is_busy

    def test_emits_order_placed_event(self, cart, catalog, selection, order_gateway, delivery_form):
        result = make_use_case(cart, catalog, selection, order_gateway).execute(delivery_form)

        assert len(result.events) == 1
        event = result.events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_reference == "501"
        assert event.line_count == 2

    def test_promotion_is_sent_and_then_cleared(
        self, cart, catalog, selection, promotions, order_gateway, delivery_form
    ):
        selection.apply("GIAM10", promotions)

        make_use_case(cart, catalog, selection, order_gateway).execute(delivery_form)

        payload = order_gateway.payloads[0]
        assert payload['PromotionId'] == 10
        assert payload['DiscountAmount'] == 13000
        assert selection.selected is None
        assert selection.entered_code == ""

    def test_customer_id_is_sent_when_known(self, cart, catalog, selection, order_gateway, delivery_form):
        delivery_form.customer_id = 42

        make_use_case(cart, catalog, selection, order_gateway).execute(delivery_form)

        assert order_gateway.payloads[0]['MaKhachHang'] == 42

    def test_bank_transfer_returns_qr_url(self, cart, catalog, selection, order_gateway, delivery_form):
        delivery_form.payment_method = PaymentMethod.BANK_TRANSFER

        result = make_use_case(cart, catalog, selection, order_gateway).execute(delivery_form)

        assert result.data.payment_qr_url == (
            "https://img.vietqr.io/image/MB-2506200466666-compact.png"
            "?amount=150000&addInfo=Thanh%20toan%20don%20DH%20501"
            "&accountName=NGO%20TRI%20ANH%20VU"
        )

    def test_empty_cart_is_rejected(self, catalog, selection, order_gateway, delivery_form):
        with pytest.raises(EmptyCartError):
            make_use_case(Cart.create(), catalog, selection, order_gateway).execute(delivery_form)
        assert order_gateway.payloads == []

    def test_delivery_requires_phone_and_address(self, cart, catalog, selection, order_gateway):
        form = PlaceOrderDTO(phone_number="0901234567", address="  ", mode=FulfillmentMode.DELIVERY)

        with pytest.raises(MissingShippingInfoError) as excinfo:
            make_use_case(cart, catalog, selection, order_gateway).execute(form)

        assert excinfo.value.field == "address"
        assert order_gateway.payloads == []

    def test_pickup_does_not_require_address(self, cart, catalog, selection, order_gateway):
        form = PlaceOrderDTO(mode=FulfillmentMode.PICKUP)

        result = make_use_case(cart, catalog, selection, order_gateway).execute(form)

        assert result.data.total == Money(amount=Decimal('130000'))

    def test_failed_submission_preserves_state(
        self, cart, catalog, selection, promotions, failing_order_gateway, delivery_form
    ):
        selection.apply("GIAM10", promotions)
        before = dict(cart.snapshot())
        use_case = make_use_case(cart, catalog, selection, failing_order_gateway)

        with pytest.raises(OrderSubmissionError) as excinfo:
            use_case.execute(delivery_form)

        assert excinfo.value.message == "Món ăn đã hết"
        assert dict(cart.snapshot()) == before
        assert selection.selected is not None
        assert cart.domain_events == []
        assert not use_case.is_busy

    def test_second_submission_while_busy_is_refused(self, cart, catalog, selection, delivery_form):
        class ReentrantGateway(OrderGateway):
            def __init__(self):
                self.use_case = None
                self.calls = 0

            def submit(self, payload):
                self.calls += 1
                self.use_case.execute(delivery_form)
                return {'MaDonHang': 1}

        gateway = ReentrantGateway()
        use_case = make_use_case(cart, catalog, selection, gateway)
        gateway.use_case = use_case

        with pytest.raises(SubmissionInProgressError):
            use_case.execute(delivery_form)

        assert gateway.calls == 1
        assert not cart.is_empty
        assert not use_case.is_busy
