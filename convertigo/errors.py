from typing import Iterable, List, Optional


class ConverterError(Exception):
    """Base exception for currency converter errors"""
    pass


class ConfigError(ConverterError):
    """Bundled configuration file could not be read"""
    pass


class RateFetchError(ConverterError):
    """Exchange rates could not be fetched for a base currency.

    No partial table is ever attached: the conversion must be aborted.
    """

    def __init__(self, base_currency: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.base_currency = base_currency
        self.status_code = status_code


class TransportError(RateFetchError):
    """HTTP request did not complete (DNS, connection, TLS, ...)"""
    pass


class ResponseParseError(RateFetchError):
    """Response body was not valid JSON"""
    pass


class SchemaError(RateFetchError):
    """JSON body parsed but had no usable 'rates' object"""
    pass


class CurrencyNotFoundError(ConverterError):
    """Target currency is absent from the fetched rate table"""

    def __init__(self, currency: str, available: Iterable[str]):
        self.currency = currency
        self.available: List[str] = sorted(available)
        super().__init__(f"Currency '{currency}' not found in exchange rates")
