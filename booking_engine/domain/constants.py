"""Business constants of the booking engine."""

from decimal import Decimal

# Booking window
MIN_BOOKING_DAYS = 1
MAX_BOOKING_DAYS = 14
SAME_DAY_CUTOFF_HOUR = 18

# Pricing
HOURS_PER_RENTAL_DAY = 8
DEPOSIT_RATE = Decimal("0.20")

# Provider calendar
BOOKED_DATES_HORIZON_DAYS = 365
MAX_BLOCK_RANGE_DAYS = 366

# Offer types used in contract snapshots
OFFER_TYPE_ITEM = "Item"
OFFER_TYPE_SERVICE = "Service"
