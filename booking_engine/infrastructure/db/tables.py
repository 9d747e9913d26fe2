from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

# Identity and offer stores are owned by other services; the engine only reads them.
users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
)

offers = Table(
    "offers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("owner_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("is_service", Boolean, nullable=False, default=False),
    Column("price_per_day", Numeric(12, 2)),
    Column("price_per_hour", Numeric(12, 2)),
    Column("is_active", Boolean, nullable=False, default=True),
)

bookings = Table(
    "bookings",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("offer_id", Integer, ForeignKey("offers.id"), nullable=False, index=True),
    Column("customer_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("total_price", Numeric(12, 2), nullable=False),
    Column("days_count", Integer, nullable=False),
    Column("status", String(16), nullable=False, index=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("confirmed_at", DateTime(timezone=True)),
    Column("terms_accepted", Boolean, nullable=False, default=False),
    Column("terms_accepted_at", DateTime(timezone=True)),
    Column("withdrawal_right_acknowledged", Boolean, nullable=False, default=False),
    Column("withdrawal_right_acknowledged_at", DateTime(timezone=True)),
    Column("cancellation_reason", String(500)),
    Column("cancelled_at", DateTime(timezone=True)),
)

# One row per occupied day of a confirmed booking. The unique key is the
# storage-level guard against double booking.
booking_days = Table(
    "booking_days",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("booking_id", Integer, ForeignKey("bookings.id"), nullable=False, index=True),
    Column("offer_id", Integer, nullable=False),
    Column("day", Date, nullable=False),
    UniqueConstraint("offer_id", "day", name="uq_booking_days_offer_day"),
)

availability_overrides = Table(
    "availability_overrides",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("offer_id", Integer, ForeignKey("offers.id"), nullable=False),
    Column("day", Date, nullable=False),
    Column("is_available", Boolean, nullable=False, default=False),
    Column("reason", String(200)),
    Column("created_at", DateTime(timezone=True)),
    UniqueConstraint("offer_id", "day", name="uq_availability_offer_day"),
)

rental_contracts = Table(
    "rental_contracts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("booking_id", Integer, ForeignKey("bookings.id"), nullable=False, unique=True),
    Column("lessor_id", Integer, nullable=False, index=True),
    Column("lessee_id", Integer, nullable=False, index=True),
    Column("offer_title", String(200), nullable=False),
    Column("offer_description", Text, nullable=False),
    Column("offer_type", String(16), nullable=False),
    Column("rental_start_date", Date, nullable=False),
    Column("rental_end_date", Date, nullable=False),
    Column("rental_days", Integer, nullable=False),
    Column("total_price", Numeric(12, 2), nullable=False),
    Column("deposit_amount", Numeric(12, 2), nullable=False),
    Column("price_per_day", Numeric(12, 2), nullable=False),
    Column("lessor_name", String(200), nullable=False),
    Column("lessor_email", String(255), nullable=False),
    Column("lessee_name", String(200), nullable=False),
    Column("lessee_email", String(255), nullable=False),
    Column("terms_and_conditions", Text, nullable=False),
    Column("special_conditions", Text, nullable=False, default=""),
    Column("signed_by_lessor_at", DateTime(timezone=True)),
    Column("signed_by_lessee_at", DateTime(timezone=True)),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("last_modified_at", DateTime(timezone=True)),
    Column("cancellation_reason", String(500)),
    Column("cancelled_at", DateTime(timezone=True)),
    Column("completed_at", DateTime(timezone=True)),
)

messages = Table(
    "messages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("sender_id", Integer, nullable=False),
    Column("recipient_id", Integer, nullable=False, index=True),
    Column("offer_id", Integer),
    Column("content", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)
