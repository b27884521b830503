"""Conversions between decimal coin strings and satoshi amounts."""

from decimal import Decimal, InvalidOperation

SATOSHIS_PER_COIN = 100_000_000
COIN_DECIMALS = 8


def parse_coin(text: str) -> int:
    """
    Parses a decimal coin amount into satoshis.

    Args:
        text: The amount in whole coins, e.g. "0.1".

    Returns:
        The amount in satoshis.

    Raises:
        ValueError: If the amount is not a finite, non-negative number with at
            most eight fractional digits.
    """
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise ValueError(f"Invalid coin amount: {text!r}.") from exc
    if not value.is_finite():
        raise ValueError(f"Invalid coin amount: {text!r}.")
    if value < 0:
        raise ValueError(f"Coin amount must not be negative: {text!r}.")
    satoshis = value * SATOSHIS_PER_COIN
    if satoshis != satoshis.to_integral_value():
        raise ValueError(
            f"Coin amount has more than {COIN_DECIMALS} decimals: {text!r}."
        )
    return int(satoshis)


def format_coin(amount: int) -> str:
    """
    Formats a satoshi amount as a plain decimal coin string.

    Args:
        amount: The amount in satoshis.

    Returns:
        The amount in whole coins with at least one fractional digit.
    """
    sign = "-" if amount < 0 else ""
    whole, fraction = divmod(abs(amount), SATOSHIS_PER_COIN)
    digits = f"{fraction:0{COIN_DECIMALS}d}".rstrip("0") or "0"
    return f"{sign}{whole}.{digits}"
