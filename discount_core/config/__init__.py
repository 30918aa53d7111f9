"""
Configuration module for discount factor construction.

Provides Pydantic-validated configuration models and YAML loading utilities
for zero-rate curves and discount factors.
"""

from discount_core.config.loader import (
    build_curve,
    build_discount_factors,
    create_default_discount_factors_config,
    load_discount_factors,
    load_discount_factors_config,
)
from discount_core.config.models import CurveConfig, DiscountFactorsConfig

__all__ = [
    # Models
    "CurveConfig",
    "DiscountFactorsConfig",
    # Loaders
    "load_discount_factors_config",
    "load_discount_factors",
    "build_curve",
    "build_discount_factors",
    "create_default_discount_factors_config",
]
