"""
Currency identifiers.

A currency is identified by its three-letter ISO-4217 style code. Codes are
normalised to upper case so that ``Currency.of("eur") == Currency.of("EUR")``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """
    Three-letter currency code.

    Attributes
    ----------
    code : str
        Upper-case code, e.g. "USD"

    Example
    -------
    >>> Currency.of("gbp")
    Currency(code='GBP')
    """

    code: str

    def __post_init__(self) -> None:
        """Validate the code."""
        if not isinstance(self.code, str):
            raise ValueError(f"Currency code must be a string, got {self.code!r}")
        if len(self.code) != 3 or not self.code.isalpha() or not self.code.isupper():
            raise ValueError(
                f"Currency code must be three upper-case letters, got '{self.code}'"
            )

    @classmethod
    def of(cls, code: "str | Currency") -> "Currency":
        """Parse a currency code, accepting any letter case."""
        if isinstance(code, Currency):
            return code
        if not isinstance(code, str):
            raise ValueError(f"Currency code must be a string, got {code!r}")
        return cls(code.strip().upper())

    def __str__(self) -> str:
        return self.code


USD = Currency("USD")
EUR = Currency("EUR")
GBP = Currency("GBP")
JPY = Currency("JPY")
CHF = Currency("CHF")
