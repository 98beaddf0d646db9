"""Underlying price process: GBM step function, price path and normal draw source."""

from .price_path import PricePath, PricePathGenerator, next_price
from .random_source import NormalDrawSource, SeededNormalSource, create_normal_source

__all__ = [
    "NormalDrawSource",
    "PricePath",
    "PricePathGenerator",
    "SeededNormalSource",
    "create_normal_source",
    "next_price",
]
