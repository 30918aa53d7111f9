"""
YAML configuration loading utilities.

Provides functions to load and validate configuration from YAML files,
and to build curves and discount factors from validated configuration.
"""

import logging
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from discount_core.config.models import CurveConfig, DiscountFactorsConfig
from discount_core.discounting import ZeroRatePeriodicDiscountFactors
from discount_core.market.currency import Currency
from discount_core.market.curve import InterpolatedNodalCurve
from discount_core.market.metadata import CurveMetadata

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """
    Load a YAML file and return its contents as a dictionary.

    Parameters
    ----------
    path : Path
        Path to the YAML file

    Returns
    -------
    dict[str, Any]
        Parsed YAML contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    yaml.YAMLError
        If the file contains invalid YAML
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_discount_factors_config(path: Path | str) -> DiscountFactorsConfig:
    """
    Load discount factor configuration from a YAML file.

    Parameters
    ----------
    path : Path | str
        Path to the configuration YAML file

    Returns
    -------
    DiscountFactorsConfig
        Validated configuration

    Example
    -------
    >>> config = load_discount_factors_config("data/usd_discounting.yaml")
    >>> print(config.curve.name)
    USD-DSC
    """
    path = Path(path)
    data = _load_yaml(path)

    # Handle nested 'discount_factors' key if present
    if "discount_factors" in data:
        data = data["discount_factors"]

    logger.debug("Loaded discount factor configuration from %s", path)
    return DiscountFactorsConfig(**data)


def build_curve(config: CurveConfig) -> InterpolatedNodalCurve:
    """
    Build a zero-rate curve from configuration.

    Parameters
    ----------
    config : CurveConfig
        Validated curve configuration

    Returns
    -------
    InterpolatedNodalCurve
        Curve with year-fraction / zero-rate metadata
    """
    metadata = CurveMetadata.zero_rates(
        config.name, config.day_count, config.compounding_per_year
    )
    return InterpolatedNodalCurve(
        metadata=metadata,
        x_values=np.array(config.tenors),
        y_values=np.array(config.rates),
    )


def build_discount_factors(
    config: DiscountFactorsConfig,
) -> ZeroRatePeriodicDiscountFactors:
    """Build discount factors from configuration."""
    return ZeroRatePeriodicDiscountFactors.of(
        Currency.of(config.currency),
        config.valuation_date,
        build_curve(config.curve),
    )


def load_discount_factors(path: Path | str) -> ZeroRatePeriodicDiscountFactors:
    """
    Load configuration from a YAML file and build discount factors.

    Example
    -------
    >>> dfs = load_discount_factors("data/usd_discounting.yaml")
    >>> dfs.discount_factor(date(2027, 1, 4))
    """
    return build_discount_factors(load_discount_factors_config(path))


def create_default_discount_factors_config() -> DiscountFactorsConfig:
    """
    Create a default configuration with typical values.

    Returns
    -------
    DiscountFactorsConfig
        USD semi-annual zero curve suitable for testing
    """
    from datetime import date

    return DiscountFactorsConfig(
        currency="USD",
        valuation_date=date(2025, 1, 2),
        curve=CurveConfig(
            name="USD-DSC",
            day_count="ACT/365F",
            compounding_per_year=2,
            tenors=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0],
            rates=[0.043, 0.042, 0.040, 0.038, 0.037, 0.039],
        ),
    )
