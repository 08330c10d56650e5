"""
Growth-rate policies — choose the annual rate applied to the pooled investment balance.
"""

from .base import GrowthRatePolicy
from .constant import ConstantGrowthPolicy
from .pooled import PooledFirstMatchPolicy

__all__ = [
    "GrowthRatePolicy",
    "ConstantGrowthPolicy",
    "PooledFirstMatchPolicy",
]
