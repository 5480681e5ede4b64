"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MINUTES_PER_DAY = 24 * 60

DEFAULT_CHECKIN_START_MINUTES = 6 * 60
DEFAULT_CHECKIN_END_MINUTES = 17 * 60 + 30
DEFAULT_CHECKOUT_LOCK_MINUTES = 17 * 60 + 30
# Same as the lock: no overtime window unless configured apart.
DEFAULT_OVERTIME_START_MINUTES = 17 * 60 + 30

DEFAULT_MAX_PAID_HOURS = Decimal("11.5")
DEFAULT_MIN_PAID_HOURS = Decimal("5")
DEFAULT_HOURLY_RATE_USDT = Decimal("2")
DEFAULT_OVERTIME_HOURLY_RATE_USDT = Decimal("4")

HALF_PAY_FACTOR = Decimal("0.5")
CENT = Decimal("0.01")
