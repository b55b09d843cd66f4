"""
Apply promotion code use case.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from shared.application import UseCase, UseCaseResult
from ...domain.entities.promotion import Promotion
from ...domain.repositories.promotion_repository import PromotionRepository
from ...domain.services.promotion_matcher import PromotionSelection
from ..dtos.order_dto import ApplyPromotionDTO


@dataclass
class ApplyPromotionUseCase(UseCase[ApplyPromotionDTO, Promotion]):
    """Matches a typed code against today's promotions and selects it."""

    promotions: PromotionSelection
    promotion_repository: PromotionRepository
    today: Callable[[], date] = field(default=date.today)

    def execute(self, input_dto: ApplyPromotionDTO) -> UseCaseResult[Promotion]:
        active = self.promotion_repository.find_active(self.today())
        return UseCaseResult.ok(self.promotions.apply(input_dto.code, active))
