from .base import RateClient
from .exchangerate_api import ExchangeRateApiClient
from .static import StaticRateClient

__all__ = ["RateClient", "ExchangeRateApiClient", "StaticRateClient"]
