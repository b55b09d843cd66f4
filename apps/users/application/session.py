"""
Customer session: the single owner of cart, catalog and credentials.
"""
import json
import logging
from datetime import date
from typing import Callable, Optional

from django.conf import settings

from apps.menu.domain.entities.catalog import Catalog
from apps.menu.domain.entities.food_item import FoodItem
from apps.menu.domain.repositories.catalog_repository import CatalogRepository
from apps.menu.infrastructure.repositories.http_catalog_repository import HttpCatalogRepository
from apps.orders.application.dtos.order_dto import PlaceOrderDTO
from apps.orders.application.use_cases import ApplyPromotionUseCase, PlaceOrderUseCase
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.repositories.order_gateway import OrderGateway
from apps.orders.domain.repositories.promotion_repository import PromotionRepository
from apps.orders.domain.services.pricing_calculator import PricingCalculator
from apps.orders.domain.services.promotion_matcher import PromotionSelection
from apps.orders.domain.value_objects.fulfillment_mode import FulfillmentMode
from apps.orders.domain.value_objects.pricing_result import PricingResult
from apps.orders.infrastructure.gateways import HttpOrderGateway, HttpPromotionRepository
from apps.reservations.application.use_cases import SubmitReservationUseCase
from apps.reservations.domain.entities.reservation_draft import ReservationDraft
from apps.reservations.domain.repositories.reservation_gateway import ReservationGateway
from apps.reservations.infrastructure.gateways import HttpReservationGateway
from shared.infrastructure.http import ApiClient
from ..domain.entities.customer_profile import CustomerProfile
from ..domain.exceptions import InvalidProfileDataError
from ..domain.repositories.credential_store import CredentialStore
from ..interfaces.serializers.profile_serializer import CustomerProfileSerializer

logger = logging.getLogger(__name__)


def parse_profile(data) -> CustomerProfile:
    """Normalize a backend user record into a CustomerProfile."""
    if not isinstance(data, dict):
        raise InvalidProfileDataError(f"expected an object, got {type(data).__name__}")
    serializer = CustomerProfileSerializer(data=data)
    if not serializer.is_valid():
        raise InvalidProfileDataError(str(serializer.errors))
    return serializer.to_entity()


class StoreSession:
    """
    Explicit container for everything one customer's visit shares.

    Holds the credential, the profile, the menu snapshot, the cart, the
    selected promotion and the reservation form. Collaborators are built
    from it so every part of the store sees the same state. A 401 from any
    backend call logs the customer out.
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        client: Optional[ApiClient] = None,
        catalog_repository: Optional[CatalogRepository] = None,
        promotion_repository: Optional[PromotionRepository] = None,
        order_gateway: Optional[OrderGateway] = None,
        reservation_gateway: Optional[ReservationGateway] = None,
        today: Callable[[], date] = date.today,
    ):
        self.credential_store = credential_store
        self.token: Optional[str] = None
        self.profile: Optional[CustomerProfile] = None
        self.catalog: Catalog = Catalog.empty()
        self.cart = Cart.create()
        self.promotions = PromotionSelection()
        self.reservation = ReservationDraft()

        self.client = client or ApiClient(
            token_provider=lambda: self.token,
            on_unauthorized=self.handle_auth_failure,
        )
        self.catalog_repository = catalog_repository or HttpCatalogRepository(self.client)
        self.promotion_repository = promotion_repository or HttpPromotionRepository(self.client)
        self.order_gateway = order_gateway or HttpOrderGateway(self.client)
        self.reservation_gateway = reservation_gateway or HttpReservationGateway(self.client)
        self.today = today
        self.calculator = PricingCalculator(settings.RESTAURANT_SHIPPING_FEE)

        self._place_order: Optional[PlaceOrderUseCase] = None
        self._apply_promotion: Optional[ApplyPromotionUseCase] = None
        self._submit_reservation: Optional[SubmitReservationUseCase] = None

    # Credentials

    def bootstrap(self) -> None:
        """
        Restore the persisted credential, once, at session start.

        Both slots must be present. A token whose profile cannot be read is
        kept, and the session continues without a profile.
        """
        token, user_json = self.credential_store.load()
        if not token or not user_json:
            return

        self.token = token
        try:
            self.profile = parse_profile(json.loads(user_json))
        except (ValueError, InvalidProfileDataError) as e:
            logger.error(f"Stored customer profile could not be read: {e}")
            self.profile = None
            return
        self.reservation.prefill_contact(
            full_name=self.profile.full_name,
            phone_number=self.profile.phone_number,
            email=self.profile.email,
        )

    def login(self, token: str, user: dict) -> CustomerProfile:
        profile = parse_profile(user)
        self.token = token
        self.profile = profile
        self.credential_store.save(token, json.dumps(profile.raw, ensure_ascii=False))
        self.reservation.prefill_contact(
            full_name=profile.full_name,
            phone_number=profile.phone_number,
            email=profile.email,
        )
        return profile

    def logout(self) -> None:
        self.token = None
        self.profile = None
        self.cart.clear()
        self.promotions.clear()
        self.reservation.reset()
        self.credential_store.clear()
        logger.info("Customer logged out")

    def handle_auth_failure(self) -> None:
        logger.warning("Session credential rejected by the backend; logging out")
        self.logout()

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    # Menu and cart

    def refresh_catalog(self, force: bool = False) -> Catalog:
        """Replace the menu snapshot wholesale."""
        if force:
            self.catalog_repository.invalidate()
        self.catalog = self.catalog_repository.fetch()
        return self.catalog

    def current_catalog(self) -> Catalog:
        return self.catalog

    def add_to_cart(self, item_id: int) -> FoodItem:
        item = self.catalog.require(item_id)
        self.cart.increment(item.id)
        return item

    def remove_from_cart(self, item_id: int) -> None:
        self.cart.decrement(item_id)

    def price_cart(self, mode: FulfillmentMode = FulfillmentMode.PICKUP) -> PricingResult:
        return self.calculator.calculate(
            self.cart,
            self.catalog,
            promotion=self.promotions.selected,
            mode=mode,
        )

    # Checkout and reservation

    def checkout_form(self) -> PlaceOrderDTO:
        """A checkout form pre-filled from the profile."""
        profile = self.profile or CustomerProfile()
        return PlaceOrderDTO(
            phone_number=profile.phone_number,
            address=profile.address,
            customer_id=profile.customer_id,
        )

    @property
    def place_order(self) -> PlaceOrderUseCase:
        if self._place_order is None:
            self._place_order = PlaceOrderUseCase(
                cart=self.cart,
                catalog_provider=self.current_catalog,
                promotions=self.promotions,
                order_gateway=self.order_gateway,
                calculator=self.calculator,
            )
        return self._place_order

    @property
    def apply_promotion(self) -> ApplyPromotionUseCase:
        if self._apply_promotion is None:
            self._apply_promotion = ApplyPromotionUseCase(
                promotions=self.promotions,
                promotion_repository=self.promotion_repository,
                today=self.today,
            )
        return self._apply_promotion

    @property
    def submit_reservation(self) -> SubmitReservationUseCase:
        if self._submit_reservation is None:
            self._submit_reservation = SubmitReservationUseCase(
                draft=self.reservation,
                reservation_gateway=self.reservation_gateway,
            )
        return self._submit_reservation
