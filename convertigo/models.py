import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping


def normalize_code(code: str) -> str:
    return code.strip().upper()


@dataclass(frozen=True, eq=False)
class ExchangeRateTable:
    """Rates for one base currency: 1 unit of base = rate units of code.

    The mapping is copied into a read-only view on construction so a table
    cannot change after it has been populated.
    """

    base_currency: str
    rates: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_currency", normalize_code(self.base_currency))
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def __contains__(self, code: object) -> bool:
        return code in self.rates

    def __getitem__(self, code: str) -> float:
        return self.rates[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self.rates)

    def __len__(self) -> int:
        return len(self.rates)

    def codes(self) -> List[str]:
        return sorted(self.rates)


@dataclass(frozen=True)
class ConversionRequest:
    amount: float
    source: str   # "USD", base of the fetched table
    target: str   # "EUR", lookup key into that table

    def __post_init__(self) -> None:
        if not math.isfinite(self.amount) or self.amount <= 0:
            raise ValueError(f"amount must be a positive number, got {self.amount!r}")
        object.__setattr__(self, "source", normalize_code(self.source))
        object.__setattr__(self, "target", normalize_code(self.target))


@dataclass(frozen=True)
class ConversionResult:
    request: ConversionRequest
    rate: float
    converted_amount: float

    @property
    def amount(self) -> float:
        return self.request.amount

    @property
    def source(self) -> str:
        return self.request.source

    @property
    def target(self) -> str:
        return self.request.target


@dataclass(frozen=True)
class SupportedCurrency:
    code: str    # "USD"
    label: str   # "US Dollar"
