"""Pricing - interchangeable tax strategies and the calculator that holds one."""

import math
from typing import Dict, Optional, Type

from designkit.domain.exceptions import UnsupportedKindError, ValidationError
from designkit.domain.ports.tax_strategy_port import TaxStrategy


class FixedRateTaxStrategy(TaxStrategy):
    """Multiplies the price by a fixed rate."""

    rate: float = 1.0

    def __init__(self, rate: Optional[float] = None):
        if rate is not None:
            self.rate = rate
        if not math.isfinite(self.rate) or self.rate < 0:
            raise ValidationError(f"Tax rate must be a finite, non-negative number: {self.rate}")

    def calculate(self, price: float) -> float:
        return float(price) * self.rate

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rate={self.rate})"


class StandardTaxStrategy(FixedRateTaxStrategy):
    rate = 1.2


class ReducedTaxStrategy(FixedRateTaxStrategy):
    rate = 1.055


class ExemptTaxStrategy(FixedRateTaxStrategy):
    rate = 1.0


TAX_STRATEGIES: Dict[str, Type[FixedRateTaxStrategy]] = {
    "standard": StandardTaxStrategy,
    "reduced": ReducedTaxStrategy,
    "exempt": ExemptTaxStrategy,
}


def strategy_for(name: str, rates: Optional[Dict[str, float]] = None) -> TaxStrategy:
    """
    Build a named tax strategy.

    ``rates`` overrides the built-in rate of a known name, or defines a new name.
    """
    key = name.strip().lower()
    if rates and key in rates:
        return TAX_STRATEGIES.get(key, FixedRateTaxStrategy)(rates[key])
    if key in TAX_STRATEGIES:
        return TAX_STRATEGIES[key]()
    raise UnsupportedKindError(name, set(TAX_STRATEGIES) | set(rates or {}))


class PriceCalculator:
    """Context holding one tax strategy; ``total`` delegates to it."""

    def __init__(self, strategy: TaxStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> TaxStrategy:
        return self._strategy

    def set_strategy(self, strategy: TaxStrategy) -> None:
        """Swap the held strategy; later calls to ``total`` use the new one."""
        self._strategy = strategy

    def total(self, price: float) -> float:
        """Return the price with tax applied by the held strategy."""
        if not math.isfinite(price):
            raise ValidationError(f"Price must be a finite number: {price}")
        if price < 0:
            raise ValidationError(f"Price must not be negative: {price}")
        return self._strategy.calculate(price)
