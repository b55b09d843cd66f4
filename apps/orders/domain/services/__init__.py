# Domain services
from .pricing_calculator import DEFAULT_SHIPPING_FEE, PricingCalculator
from .promotion_matcher import PromotionSelection, active_promotions, match_promotion

__all__ = [
    'DEFAULT_SHIPPING_FEE',
    'PricingCalculator',
    'PromotionSelection',
    'active_promotions',
    'match_promotion',
]
