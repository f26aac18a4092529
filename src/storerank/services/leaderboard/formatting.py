"""Display formatting for currency amounts and store URLs."""

import re
from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "$"

_SCHEME_RE = re.compile(r"^https?://")


def format_currency(amount: float) -> str:
    """Format as whole US dollars with thousands separators.

    Examples:
        1234.9  -> "$1,235"
        0       -> "$0"
        -12.5   -> "-$13"
    """
    rounded = int(Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(rounded):,}"


def format_url(url: str | None) -> str:
    """Strip the http(s) scheme and one trailing slash for display."""
    if not url:
        return ""
    stripped = _SCHEME_RE.sub("", url)
    return stripped[:-1] if stripped.endswith("/") else stripped
