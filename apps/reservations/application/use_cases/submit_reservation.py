"""
Submit reservation use case.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from django.conf import settings

from shared.application import SingleFlightMixin, UseCase, UseCaseResult
from ...domain.entities.reservation_draft import ReservationDraft
from ...domain.exceptions import ReservationSubmissionError, ReservationTimeRejectedError
from ...domain.repositories.reservation_gateway import ReservationGateway
from ...domain.services.reservation_validator import ReservationTimeValidator, format_start_time
from ...interfaces.serializers.reservation_serializer import ReservationSubmissionSerializer
from ..dtos.reservation_dto import ReservationReceiptDTO, SubmitReservationDTO

logger = logging.getLogger(__name__)


def validator_from_settings() -> ReservationTimeValidator:
    rules = settings.RESTAURANT_RESERVATION
    return ReservationTimeValidator(
        opening_hour=rules['OPENING_HOUR'],
        last_booking_hour=rules['LAST_BOOKING_HOUR'],
        max_days_ahead=rules['MAX_DAYS_AHEAD'],
    )


@dataclass
class SubmitReservationUseCase(SingleFlightMixin, UseCase[SubmitReservationDTO, ReservationReceiptDTO]):
    """
    Validates the reservation form and sends it with any committed dishes.

    The form values are written onto the draft first, so a rejected time or
    a backend failure leaves everything the customer entered in place.
    """

    draft: ReservationDraft
    reservation_gateway: ReservationGateway
    validator: ReservationTimeValidator = field(default_factory=validator_from_settings)
    clock: Callable[[], datetime] = field(default=datetime.now)

    def execute(self, input_dto: SubmitReservationDTO) -> UseCaseResult[ReservationReceiptDTO]:
        self._begin("submit_reservation")
        try:
            return self._submit(input_dto)
        finally:
            self._end()

    def _submit(self, input_dto: SubmitReservationDTO) -> UseCaseResult[ReservationReceiptDTO]:
        draft = self.draft
        draft.full_name = input_dto.full_name
        draft.phone_number = input_dto.phone_number
        draft.email = input_dto.email
        draft.start_time = input_dto.start_time
        draft.party_size = input_dto.party_size
        draft.note = input_dto.note
        draft.touch()

        try:
            start = self.validator.require_valid(draft.start_time, self.clock())
        except ReservationTimeRejectedError as e:
            logger.info(f"Reservation time rejected: {e.code}")
            raise
        draft.require_contact()
        party_size = draft.require_party_size(
            settings.RESTAURANT_PARTY_SIZE['MIN'],
            settings.RESTAURANT_PARTY_SIZE['MAX'],
        )

        dishes = draft.dishes.committed
        dish_total = draft.dishes.total
        payload = ReservationSubmissionSerializer({
            'HoTen': draft.full_name.strip(),
            'SoDienThoai': draft.phone_number.strip(),
            'Email': draft.email.strip(),
            'ThoiGianBatDau': format_start_time(start),
            'SoNguoi': party_size,
            'GhiChu': draft.note or "",
            'cartItems': [
                {'MaMon': entry.item_id, 'SoLuong': entry.quantity, 'GhiChu': ""}
                for entry in dishes
            ],
        }).data

        try:
            created = self.reservation_gateway.submit(payload)
        except ReservationSubmissionError as e:
            logger.warning(f"Reservation submission rejected: {e.message}")
            raise

        reservation_id = created.get('maDatBan') or created.get('MaDatBan')
        logger.info(
            f"Reservation {reservation_id} accepted for {party_size} guests at "
            f"{format_start_time(start)} with {len(dishes)} dishes"
        )

        draft.mark_submitted(str(reservation_id), start)

        return UseCaseResult.ok(
            ReservationReceiptDTO(
                reservation_id=reservation_id,
                start_time=start,
                party_size=party_size,
                dishes=dishes,
                dish_total=dish_total,
                table_name=created.get('tenBan'),
                backend_payload=payload,
            ),
            events=draft.clear_domain_events(),
        )
