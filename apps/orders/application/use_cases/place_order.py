"""
Place order use case.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from apps.menu.domain.entities.catalog import Catalog
from shared.application import SingleFlightMixin, UseCase, UseCaseResult
from ...domain.entities.cart import Cart
from ...domain.exceptions import EmptyCartError, OrderSubmissionError
from ...domain.repositories.order_gateway import OrderGateway
from ...domain.services.pricing_calculator import PricingCalculator
from ...domain.services.promotion_matcher import PromotionSelection
from ...domain.value_objects.payment_method import PaymentMethod
from ...domain.value_objects.pricing_result import PricingResult
from ...domain.value_objects.shipping_info import ShippingInfo
from ...infrastructure.payments.vietqr import build_vietqr_url, transfer_note
from ...interfaces.serializers.order_serializer import OrderSubmissionSerializer
from ..dtos.order_dto import OrderReceiptDTO, PlaceOrderDTO

logger = logging.getLogger(__name__)


@dataclass
class PlaceOrderUseCase(SingleFlightMixin, UseCase[PlaceOrderDTO, OrderReceiptDTO]):
    """
    Prices the cart, submits it, and empties it once the backend accepts.

    A rejected submission leaves the cart and the selected promotion exactly
    as they were so the customer can fix the form and retry.
    """

    cart: Cart
    catalog_provider: Callable[[], Catalog]
    promotions: PromotionSelection
    order_gateway: OrderGateway
    calculator: PricingCalculator = field(default_factory=PricingCalculator)

    def execute(self, input_dto: PlaceOrderDTO) -> UseCaseResult[OrderReceiptDTO]:
        self._begin("place_order")
        try:
            return self._place(input_dto)
        finally:
            self._end()

    def _place(self, input_dto: PlaceOrderDTO) -> UseCaseResult[OrderReceiptDTO]:
        if self.cart.is_empty:
            raise EmptyCartError()

        pricing = self.calculator.calculate(
            self.cart,
            self.catalog_provider(),
            promotion=self.promotions.selected,
            mode=input_dto.mode,
        )
        if not pricing.lines:
            raise EmptyCartError()

        shipping = ShippingInfo(address=input_dto.address, phone_number=input_dto.phone_number)
        if input_dto.mode.charges_shipping:
            shipping.require_complete()

        payload = self._build_payload(input_dto, pricing, shipping)

        try:
            created = self.order_gateway.submit(payload)
        except OrderSubmissionError as e:
            logger.warning(f"Order submission rejected: {e.message}")
            raise

        order_id = created.get('MaDonHang') or created.get('maDonHang')
        logger.info(
            f"Order {order_id} placed: {len(pricing.lines)} lines, total {pricing.display_total.formatted}"
        )

        self.cart.mark_checked_out(str(order_id), pricing.display_total)
        self.promotions.clear()

        qr_url = None
        if input_dto.payment_method is PaymentMethod.BANK_TRANSFER:
            note = transfer_note(order_id=order_id) if order_id else transfer_note(phone_number=shipping.phone_number)
            qr_url = build_vietqr_url(pricing.display_total.amount, note)

        return UseCaseResult.ok(
            OrderReceiptDTO(
                order_id=order_id,
                pricing=pricing,
                payment_method=input_dto.payment_method,
                payment_qr_url=qr_url,
                backend_payload=payload,
            ),
            events=self.cart.clear_domain_events(),
        )

    @staticmethod
    def _build_payload(
        input_dto: PlaceOrderDTO,
        pricing: PricingResult,
        shipping: ShippingInfo,
    ) -> dict:
        promotion = pricing.promotion
        return OrderSubmissionSerializer({
            'MaKhachHang': input_dto.customer_id,
            'ChiTietList': [
                {'MaMon': line.item_id, 'SoLuong': line.quantity}
                for line in pricing.lines
            ],
            'shippingInfo': {
                'DiaChi': shipping.address,
                'SoDienThoai': shipping.phone_number,
            },
            'paymentMethod': input_dto.payment_method.value,
            'PromotionId': promotion.id if promotion else None,
            'DiscountAmount': pricing.discount.amount,
        }).data
