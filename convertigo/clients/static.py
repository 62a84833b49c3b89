from typing import Dict, Mapping, Optional

from convertigo.clients.base import RateClient
from convertigo.errors import TransportError
from convertigo.models import ExchangeRateTable, normalize_code


class StaticRateClient(RateClient):
    """Offline client used for development and testing.

    Serves fixed tables keyed by base currency. Unknown bases behave like an
    unreachable API.
    """

    def __init__(
        self,
        tables: Mapping[str, Mapping[str, float]],
        name: str = "static",
    ):
        self.name = name
        self.tables: Dict[str, Dict[str, float]] = {
            normalize_code(base): dict(rates) for base, rates in tables.items()
        }
        self.requested: list = []

    def fetch_rates(self, base_currency: str) -> ExchangeRateTable:
        base = normalize_code(base_currency)
        self.requested.append(base)

        rates: Optional[Dict[str, float]] = self.tables.get(base)
        if rates is None:
            raise TransportError(base, f"[{self.name}] no table for {base}")
        return ExchangeRateTable(base_currency=base, rates=rates)
