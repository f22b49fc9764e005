# core/currency.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class CurrencyFormat:
    code: str
    symbol: str
    decimal_places: int = 2
    symbol_after: bool = False


def _build_table(*formats: CurrencyFormat) -> Mapping[str, CurrencyFormat]:
    return MappingProxyType({fmt.code: fmt for fmt in formats})


# Single source of truth: symbol, precision and symbol placement per ISO 4217 code.
CURRENCIES: Mapping[str, CurrencyFormat] = _build_table(
    CurrencyFormat("USD", "$"),
    CurrencyFormat("EUR", "€", symbol_after=True),
    CurrencyFormat("GBP", "£"),
    CurrencyFormat("JPY", "¥", decimal_places=0),
    CurrencyFormat("CNY", "¥"),
    CurrencyFormat("KRW", "₩", decimal_places=0),
    CurrencyFormat("VND", "₫", decimal_places=0, symbol_after=True),
    CurrencyFormat("THB", "฿"),
    CurrencyFormat("SGD", "S$"),
    CurrencyFormat("MYR", "RM"),
    CurrencyFormat("IDR", "Rp", decimal_places=0),
    CurrencyFormat("PHP", "₱"),
    CurrencyFormat("INR", "₹"),
    CurrencyFormat("AUD", "A$"),
    CurrencyFormat("CAD", "C$"),
    CurrencyFormat("CHF", "CHF"),
    CurrencyFormat("SEK", "kr", symbol_after=True),
    CurrencyFormat("NOK", "kr", symbol_after=True),
    CurrencyFormat("DKK", "kr", symbol_after=True),
    CurrencyFormat("PLN", "zł", symbol_after=True),
    CurrencyFormat("CZK", "Kč", symbol_after=True),
    CurrencyFormat("HUF", "Ft", symbol_after=True),
    CurrencyFormat("RUB", "₽"),
    CurrencyFormat("BRL", "R$"),
    CurrencyFormat("MXN", "$"),
    CurrencyFormat("ARS", "$"),
    CurrencyFormat("CLP", "$", decimal_places=0),
    CurrencyFormat("COP", "$"),
    CurrencyFormat("PEN", "S/"),
    CurrencyFormat("TRY", "₺"),
    CurrencyFormat("ZAR", "R"),
    CurrencyFormat("EGP", "E£"),
    CurrencyFormat("AED", "د.إ"),
    CurrencyFormat("SAR", "﷼"),
    CurrencyFormat("QAR", "﷼"),
    CurrencyFormat("KWD", "د.ك"),
    CurrencyFormat("BHD", ".د.ب"),
    CurrencyFormat("OMR", "﷼"),
    CurrencyFormat("JOD", "د.ا"),
    CurrencyFormat("LBP", "£"),
    CurrencyFormat("ILS", "₪"),
    CurrencyFormat("PKR", "₨"),
    CurrencyFormat("BDT", "৳"),
    CurrencyFormat("LKR", "₨"),
    CurrencyFormat("NPR", "₨"),
    CurrencyFormat("MMK", "K"),
    CurrencyFormat("LAK", "₭"),
    CurrencyFormat("KHR", "៛"),
    # no display symbol, only the "no minor unit" rule applies
    CurrencyFormat("KMF", "KMF", decimal_places=0),
    CurrencyFormat("DJF", "DJF", decimal_places=0),
    CurrencyFormat("GNF", "GNF", decimal_places=0),
    CurrencyFormat("ISK", "ISK", decimal_places=0),
    CurrencyFormat("PYG", "PYG", decimal_places=0),
    CurrencyFormat("RWF", "RWF", decimal_places=0),
    CurrencyFormat("UGX", "UGX", decimal_places=0),
    CurrencyFormat("VUV", "VUV", decimal_places=0),
    CurrencyFormat("XAF", "XAF", decimal_places=0),
    CurrencyFormat("XOF", "XOF", decimal_places=0),
    CurrencyFormat("XPF", "XPF", decimal_places=0),
)


def get_currency_format(code: str) -> CurrencyFormat:
    code = (code or "").upper()
    return CURRENCIES.get(code) or CurrencyFormat(code, code)


def currency_symbol(code: str) -> str:
    return get_currency_format(code).symbol


def format_number(value, decimal_places: int) -> str:
    """
    Round half away from zero and group thousands with ",".

    format_number(1234.5, 2) -> "1,234.50"
    format_number(1234.5, 0) -> "1,235"
    """
    if value is None:
        value = 0
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        # room for every integer digit plus the fraction
        ctx.prec = max(ctx.prec, amount.adjusted() + decimal_places + 2)
        rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        # "-0.00" is never shown
        rounded = abs(rounded)
    return f"{rounded:,.{decimal_places}f}"


def format_price(price, currency: str) -> str:
    fmt = get_currency_format(currency)
    amount = format_number(price, fmt.decimal_places)

    if fmt.symbol_after:
        return f"{amount} {fmt.symbol}"

    return f"{fmt.symbol} {amount}"
