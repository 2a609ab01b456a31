"""
The pricing module determines the price of a rent. A bike is billed
for exactly the time it was out, at its hourly rate: fractional hours
are billed proportionally and there is no minimum charge.
"""

from datetime import datetime, timedelta

MILLISECONDS_PER_HOUR = 1000 * 60 * 60


async def get_price(start_date: datetime, end_date: datetime, hourly_rate: float) -> float:
    """
    Given the start and end of a rent, returns its price.

    :raises ValueError: If the rent ends before it starts.
    """
    if end_date < start_date:
        raise ValueError(f"Rent ends ({end_date}) before it starts ({start_date}).")

    milliseconds = (end_date - start_date) / timedelta(milliseconds=1)
    hours = milliseconds / MILLISECONDS_PER_HOUR

    return hours * hourly_rate
