import math
import sys
from numbers import Real
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from convertigo.clients.base import RateClient
from convertigo.config import DEFAULT_BASE_URL
from convertigo.errors import ResponseParseError, SchemaError, TransportError
from convertigo.models import ExchangeRateTable, normalize_code


def parse_rates(base: str, data: Any, status_code: Optional[int] = None) -> Dict[str, float]:
    """Extract the `rates` object from a decoded response body.

    Every value must be a finite real number. Booleans are rejected even
    though JSON decoders hand them back as ints.
    """
    if not isinstance(data, dict):
        raise SchemaError(base, "response is not a JSON object", status_code)
    if "rates" not in data:
        raise SchemaError(base, "JSON does not contain 'rates' field", status_code)

    raw_rates = data["rates"]
    if not isinstance(raw_rates, dict):
        raise SchemaError(base, "'rates' is not a JSON object", status_code)

    rates: Dict[str, float] = {}
    for code, value in raw_rates.items():
        if isinstance(value, bool) or not isinstance(value, Real):
            raise SchemaError(base, f"rate for {code!r} is not a number: {value!r}", status_code)
        try:
            rate = float(value)
        except (OverflowError, ValueError) as exc:
            raise SchemaError(base, f"rate for {code!r} is not a number: {value!r}", status_code) from exc
        if not math.isfinite(rate):
            raise SchemaError(base, f"rate for {code!r} is not finite", status_code)
        rates[str(code)] = rate
    return rates


class ExchangeRateApiClient(RateClient):
    """Client for the public exchangerate-api.com v4 `latest` endpoint.

    One GET per call, on a session owned by the caller:

        GET {base_url}/{BASE}

    No auth, headers or query parameters. The status code is not checked
    before parsing; an error body without `rates` ends up as a SchemaError.
    """

    def __init__(
        self,
        session: requests.Session,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: Optional[float] = None,
        name: str = "exchangerate_api",
    ):
        self.name = name
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    def url_for(self, base_currency: str) -> str:
        return f"{self.base_url}/{quote(normalize_code(base_currency), safe='')}"

    def _report(self, message: str) -> None:
        print(f"[{self.name}] {message}", file=sys.stderr)

    def fetch_rates(self, base_currency: str) -> ExchangeRateTable:
        base = normalize_code(base_currency)
        url = self.url_for(base)

        try:
            resp = self.session.get(url, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            self._report(f"HTTP error for {base}: {exc}")
            raise TransportError(base, str(exc)) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            self._report(f"Non-JSON response for {base} (HTTP {resp.status_code}): {exc}")
            raise ResponseParseError(base, f"JSON parse error: {exc}", resp.status_code) from exc

        try:
            rates = parse_rates(base, data, resp.status_code)
        except SchemaError as exc:
            self._report(f"{exc} (HTTP {resp.status_code})")
            raise

        return ExchangeRateTable(base_currency=base, rates=rates)
