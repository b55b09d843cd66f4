"""
Promotion matching and selection tests.
"""
from datetime import date
from decimal import Decimal

import pytest

from apps.menu.domain.value_objects.money import Money
from apps.orders.application.dtos import ApplyPromotionDTO
from apps.orders.application.use_cases import ApplyPromotionUseCase
from apps.orders.domain.entities.promotion import Promotion
from apps.orders.domain.exceptions import EmptyPromotionCodeError, PromotionNotFoundError
from apps.orders.domain.services.promotion_matcher import (
    PromotionSelection,
    active_promotions,
    match_promotion,
)
from apps.orders.domain.value_objects.discount_kind import DiscountKind

TODAY = date(2026, 10, 19)


class TestPromotion:
    def test_window_is_inclusive(self, fixed_promotion):
        assert fixed_promotion.is_active_on(date(2026, 10, 19))
        assert not fixed_promotion.is_active_on(date(2026, 10, 18))
        assert not fixed_promotion.is_active_on(date(2026, 10, 20))

    def test_percentage_over_100_is_rejected(self):
        with pytest.raises(ValueError):
            Promotion(
                id=1, name="x", kind=DiscountKind.PERCENTAGE, value=Decimal('150'),
                start_date=TODAY, end_date=TODAY, code="X",
            )

    def test_promotion_without_code_never_matches(self):
        promotion = Promotion(
            id=1, name="Auto", kind=DiscountKind.FIXED_AMOUNT, value=Decimal('1000'),
            start_date=TODAY, end_date=TODAY,
        )
        assert not promotion.matches_code("AUTO")

    def test_labels(self, percent_promotion, fixed_promotion):
        assert percent_promotion.label == "10%"
        assert fixed_promotion.label == "200.000 ₫"

    def test_discount_never_exceeds_subtotal(self, fixed_promotion):
        subtotal = Money(amount=Decimal('50000'))
        assert fixed_promotion.discount_for(subtotal) == subtotal


class TestMatchPromotion:
    def test_match_ignores_case_and_whitespace(self, promotions, percent_promotion):
        active = active_promotions(promotions, TODAY)

        assert match_promotion("  giam10 ", active) is percent_promotion

    def test_blank_code_is_rejected(self, promotions):
        with pytest.raises(EmptyPromotionCodeError) as excinfo:
            match_promotion("   ", promotions)
        assert excinfo.value.message == "Please enter a promotion code."

    def test_inactive_promotion_does_not_match(self, promotions):
        active = active_promotions(promotions, TODAY)

        with pytest.raises(PromotionNotFoundError) as excinfo:
            match_promotion("SUMMER", active)
        assert excinfo.value.code == "PROMOTION_NOT_FOUND"

    def test_partial_code_does_not_match(self, promotions):
        with pytest.raises(PromotionNotFoundError):
            match_promotion("GIAM", promotions)

    def test_first_of_duplicate_codes_wins(self, percent_promotion):
        twin = Promotion(
            id=99, name="Twin", kind=DiscountKind.FIXED_AMOUNT, value=Decimal('5000'),
            start_date=TODAY, end_date=TODAY, code="giam10",
        )

        assert match_promotion("GIAM10", [percent_promotion, twin]) is percent_promotion


class TestPromotionSelection:
    def test_apply_then_clear(self, promotions, percent_promotion):
        selection = PromotionSelection()
        selection.apply("GIAM10", promotions)

        assert selection.selected is percent_promotion
        assert selection.entered_code == "GIAM10"

        selection.clear()
        assert selection.selected is None
        assert selection.entered_code == ""
        assert not selection.has_selection

    def test_failed_apply_keeps_previous_selection(self, promotions, percent_promotion):
        selection = PromotionSelection()
        selection.apply("GIAM10", promotions)

        with pytest.raises(PromotionNotFoundError):
            selection.apply("NOPE", promotions)

        assert selection.selected is percent_promotion
        assert selection.entered_code == "NOPE"


class TestApplyPromotionUseCase:
    def test_selects_active_promotion(self, selection, promotion_repository, fixed_promotion):
        use_case = ApplyPromotionUseCase(
            promotions=selection,
            promotion_repository=promotion_repository,
            today=lambda: TODAY,
        )

        result = use_case.execute(ApplyPromotionDTO(code="big200"))

        assert result.success
        assert result.data is fixed_promotion
        assert selection.selected is fixed_promotion

    def test_expired_code_is_not_found(self, selection, promotion_repository):
        use_case = ApplyPromotionUseCase(
            promotions=selection,
            promotion_repository=promotion_repository,
            today=lambda: TODAY,
        )

        with pytest.raises(PromotionNotFoundError):
            use_case.execute(ApplyPromotionDTO(code="SUMMER"))
        assert selection.selected is None
