from abc import ABC, abstractmethod

from convertigo.models import ExchangeRateTable


class RateClient(ABC):
    name: str

    @abstractmethod
    def fetch_rates(self, base_currency: str) -> ExchangeRateTable:
        """Return the full rate table for a base currency.

        Raises a RateFetchError subclass instead of returning partial data.
        """
        raise NotImplementedError
