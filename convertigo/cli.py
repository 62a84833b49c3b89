import sys
from typing import Iterable, List, Optional, TextIO

import requests

from convertigo.clients.base import RateClient
from convertigo.clients.exchangerate_api import ExchangeRateApiClient
from convertigo.config import load_config
from convertigo.converter import convert, format_not_found, format_request, format_result
from convertigo.errors import (
    CurrencyNotFoundError,
    RateFetchError,
    ResponseParseError,
    SchemaError,
    TransportError,
)
from convertigo.models import ConversionRequest, ConversionResult, SupportedCurrency
from convertigo.prompts import InputFunc, read_amount, read_currency, read_menu_choice


WELCOME_LINES = [
    "========================================",
    "        CONVERTIGO!",
    "========================================",
    "Welcome! ConvertiGo! converts between",
    "popular currencies using live exchange rates.",
    "",
]

MENU_LINES = [
    "What would you like to do?",
    "1. Convert currency",
    "2. View supported currencies",
    "3. Exit",
]

FETCH_ERROR_MESSAGES = {
    TransportError: "Error: Could not fetch exchange rates. Please check your internet connection.",
    ResponseParseError: "Error: Could not read the exchange rate response (invalid JSON).",
    SchemaError: "Error: Exchange rate response did not contain usable 'rates' data.",
}


def _emit(lines: Iterable[str], out: TextIO) -> None:
    for line in lines:
        print(line, file=out)


def fetch_error_message(exc: RateFetchError) -> str:
    for kind, message in FETCH_ERROR_MESSAGES.items():
        if isinstance(exc, kind):
            return message
    return FETCH_ERROR_MESSAGES[TransportError]


def run_conversion(
    client: RateClient,
    amount: float,
    source: str,
    target: str,
    output: Optional[TextIO] = None,
) -> Optional[ConversionResult]:
    """One pass of fetch -> lookup -> compute -> display.

    Returns None when the conversion was aborted; the reason has already been
    printed and no result lines are written.
    """
    out = output or sys.stdout
    request = ConversionRequest(amount=amount, source=source, target=target)

    print("", file=out)
    _emit(format_request(request), out)
    print("", file=out)

    print("Fetching live exchange rates...", file=out)
    try:
        table = client.fetch_rates(request.source)
    except RateFetchError as exc:
        print(fetch_error_message(exc), file=out)
        print("", file=out)
        return None

    try:
        result = convert(request, table)
    except CurrencyNotFoundError as exc:
        _emit(format_not_found(exc), out)
        print("", file=out)
        return None

    _emit(format_result(result), out)
    print("", file=out)
    return result


def show_supported_currencies(currencies: List[SupportedCurrency], out: TextIO) -> None:
    print("", file=out)
    print("=== Supported Currencies ===", file=out)
    for c in currencies:
        print(f"{c.code} - {c.label}", file=out)
    print("==========================", file=out)
    print("", file=out)


def run_menu(
    client: RateClient,
    currencies: List[SupportedCurrency],
    input_func: Optional[InputFunc] = None,
    output: Optional[TextIO] = None,
) -> int:
    """Interactive loop. Returns the process exit code."""
    out = output or sys.stdout
    _emit(WELCOME_LINES, out)

    try:
        while True:
            _emit(MENU_LINES, out)
            choice = read_menu_choice(input_func)

            if choice == "1":
                amount = read_amount(input_func, out)
                source = read_currency("Enter source currency (e.g., USD, EUR, GBP): ", input_func)
                target = read_currency("Enter target currency (e.g., USD, EUR, GBP): ", input_func)
                run_conversion(client, amount, source, target, out)
            elif choice == "2":
                show_supported_currencies(currencies, out)
            elif choice == "3":
                print("Thank you for using Currency Converter!", file=out)
                return 0
            else:
                print("Invalid choice. Please try again.", file=out)
                print("", file=out)
    except EOFError:
        # stdin closed: same as choosing Exit
        print("", file=out)
        return 0


def main() -> int:
    cfg = load_config()

    with requests.Session() as session:
        client = ExchangeRateApiClient(
            session=session,
            base_url=cfg.base_url,
            timeout_seconds=cfg.timeout_seconds,
        )
        try:
            return run_menu(client, cfg.supported_currencies)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            return 130


if __name__ == "__main__":
    sys.exit(main())
