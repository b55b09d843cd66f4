"""
Promotion code lookup and the sticky selection built on it.
"""
import logging
from datetime import date
from typing import Iterable, List, Optional

from ..entities.promotion import Promotion
from ..exceptions import EmptyPromotionCodeError, PromotionNotFoundError

logger = logging.getLogger(__name__)


def active_promotions(promotions: Iterable[Promotion], today: date) -> List[Promotion]:
    """Keep the promotions whose window contains `today`, in feed order."""
    return [promotion for promotion in promotions if promotion.is_active_on(today)]


def match_promotion(code: str, promotions: Iterable[Promotion]) -> Promotion:
    """
    Find the promotion whose redemption code equals `code`, ignoring case and
    surrounding whitespace.

    `promotions` must already be filtered to the active ones. When two share
    a code the first in the list wins.
    """
    entered = (code or "").strip()
    if not entered:
        raise EmptyPromotionCodeError()

    for promotion in promotions:
        if promotion.matches_code(entered):
            return promotion
    raise PromotionNotFoundError(entered)


class PromotionSelection:
    """
    The promotion chosen at checkout together with the code typed for it.

    A selection stays in place until `clear()` is called; a failed `apply`
    keeps the previously selected promotion.
    """

    def __init__(self):
        self.entered_code: str = ""
        self.selected: Optional[Promotion] = None

    def apply(self, code: str, promotions: Iterable[Promotion]) -> Promotion:
        self.entered_code = code or ""
        promotion = match_promotion(code, promotions)
        self.selected = promotion
        logger.info(f"Promotion {promotion.id} selected with code '{promotion.code}'")
        return promotion

    def clear(self) -> None:
        self.entered_code = ""
        self.selected = None

    @property
    def has_selection(self) -> bool:
        return self.selected is not None
