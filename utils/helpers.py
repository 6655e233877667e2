# Utility functions
import logging
from datetime import date, datetime
from decimal import Decimal

from utils.config import CURRENCY_SYMBOL, LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level=LOG_LEVEL):
    """
    Configures the root logger once for the whole program.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def to_decimal(value) -> Decimal:
    """
    Converts a money amount to Decimal. Floats go through their shortest
    repr, so 1000.1 becomes Decimal("1000.1") rather than its binary expansion.
    """
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def format_currency(amount) -> str:
    """
    Formats an amount with the configured currency symbol and two decimals.
    """
    amount = to_decimal(amount)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def format_short_date(value) -> str:
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        return "N/A"
    return value.strftime("%m/%d/%Y")


def format_timestamp(value: datetime) -> str:
    return value.strftime("%m/%d/%Y %I:%M %p")


if __name__ == "__main__":
    # Example usage
    print(format_currency("120.5"))
    print(format_short_date(date.today()))
