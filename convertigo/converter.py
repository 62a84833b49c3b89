from typing import List

from convertigo.errors import CurrencyNotFoundError
from convertigo.models import ConversionRequest, ConversionResult, ExchangeRateTable


def convert(request: ConversionRequest, table: ExchangeRateTable) -> ConversionResult:
    """Convert request.amount into request.target using a table fetched for
    request.source.

    The table's rates read "1 source = rate units of X", so the result is a
    single multiplication. Values keep full float precision; rounding only
    happens in the format_* helpers.
    """
    if request.target not in table:
        raise CurrencyNotFoundError(request.target, table.codes())

    rate = table[request.target]
    return ConversionResult(
        request=request,
        rate=rate,
        converted_amount=request.amount * rate,
    )


def format_request(request: ConversionRequest) -> List[str]:
    return [
        "=== Conversion Request ===",
        f"Amount: {request.amount:.2f} {request.source}",
        f"Target: {request.target}",
        "========================",
    ]


def format_result(result: ConversionResult) -> List[str]:
    return [
        "=== Conversion Result ===",
        f"{result.amount:.2f} {result.source} = {result.converted_amount:.2f} {result.target}",
        f"Exchange Rate: 1 {result.source} = {result.rate:.2f} {result.target}",
        "========================",
    ]


def format_not_found(exc: CurrencyNotFoundError) -> List[str]:
    return [
        f"Error: Currency '{exc.currency}' not found in exchange rates.",
        "Available currencies: " + " ".join(exc.available),
    ]
