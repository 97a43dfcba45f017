"""Helpers sobre `OrderStats` para el resumen del dashboard."""

from __future__ import annotations

import math

from core.domain.models import OrderStats

_CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "MXN": "MX$",
    "BRL": "R$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "CN¥",
    "INR": "₹",
    "KRW": "₩",
    "RUB": "₽",
    "TRY": "₺",
    "ILS": "₪",
    "VND": "₫",
    "NGN": "₦",
    "PHP": "₱",
    "UAH": "₴",
    "PLN": "zł",
    "CHF": "CHF",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr.",
    "ZAR": "R",
}

_UNITS = ("k", "m", "b", "t", "p", "e")


def currency_symbol(stats: OrderStats) -> str:
    """Símbolo de la primera moneda no vacía de los items.

    Sin items (o sin moneda) devuelve `""`; un código desconocido se devuelve tal cual.
    """

    currency = next((item.currency for item in stats.items if item.currency), None)
    if currency is None:
        return ""
    return _CURRENCY_SYMBOLS.get(currency.upper(), currency)


def total_sales(stats: OrderStats) -> float:
    """Suma de `total_sales` de los items (no `total_gross_sales` ni `total_net_sales`)."""

    return sum(item.total_sales for item in stats.items)


def friendly_number(value: float) -> str:
    """Abrevia cantidades: `999`, `1.2k`, `3.4m`, `-5.0k`."""

    sign = "-" if value < 0 else ""
    num = abs(value)
    if round(num, 2) < 1000:
        num = round(num, 2)
        if num == int(num):
            return f"{sign}{int(num)}"
        return f"{sign}{num:.2f}".rstrip("0").rstrip(".")

    exp = max(1, min(int(math.log10(num) / 3), len(_UNITS)))
    rounded = round(10 * num / 1000**exp) / 10
    if rounded >= 1000 and exp < len(_UNITS):
        exp += 1
        rounded = round(10 * num / 1000**exp) / 10
    return f"{sign}{rounded}{_UNITS[exp - 1]}"
