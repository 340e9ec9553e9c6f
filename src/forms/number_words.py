"""
Amount-in-words for Indian currency (crore / lakh / thousand grouping).

    number_to_words(150000)  -> "One Lakh Fifty Thousand Only"
    number_to_words(0)       -> "Zero"
"""

import math

ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def round_rupees(value) -> int:
    """Nearest whole rupee, halves rounded up (2.5 -> 3, not banker's 2)."""
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot round a non-finite amount: {value!r}")
    return int(math.floor(value + 0.5))


def _below_thousand(n: int) -> str:
    if n == 0:
        return ""
    if n < 20:
        return ONES[n]
    if n < 100:
        return TENS[n // 10] + (" " + ONES[n % 10] if n % 10 else "")
    rest = n % 100
    return ONES[n // 100] + " Hundred" + (" and " + _below_thousand(rest) if rest else "")


def _spell(n: int) -> str:
    parts = []
    if n >= CRORE:
        # crore count can itself run past a thousand
        parts.append(_spell(n // CRORE) + " Crore")
        n %= CRORE
    if n >= LAKH:
        parts.append(_below_thousand(n // LAKH) + " Lakh")
        n %= LAKH
    if n >= THOUSAND:
        parts.append(_below_thousand(n // THOUSAND) + " Thousand")
        n %= THOUSAND
    parts.append(_below_thousand(n))
    return " ".join(p for p in parts if p).strip()


def number_to_words(num) -> str:
    """Whole-rupee amount in words with the "Only" suffix.

    Floats are rounded first. Zero is the bare "Zero" with no suffix.
    NaN, infinities and negatives raise ValueError.
    """
    if num < 0:
        raise ValueError(f"Amount in words needs a non-negative amount, got {num!r}")
    n = round_rupees(num)
    if n == 0:
        return "Zero"
    return _spell(n) + " Only"


def amount_in_words(total) -> str:
    """Grand total → words. Paise are not spoken; bad input reads as zero."""
    try:
        value = float(total or 0)
    except (TypeError, ValueError):
        value = 0.0
    if not math.isfinite(value):
        value = 0.0
    return number_to_words(value)
