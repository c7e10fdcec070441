"""AMM (Automated Market Maker) math."""

from swap_router.amm.base import SwapResult
from swap_router.amm.constant_product import ConstantProduct, constant_product

__all__ = [
    "SwapResult",
    "ConstantProduct",
    "constant_product",
]
