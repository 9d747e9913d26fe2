"""Domain exceptions of the booking engine."""

from datetime import date


class DomainError(Exception):
    """Base class for every domain error.

    ``http_status`` is the status the API layer answers with when the error
    reaches the global exception handler.
    """

    http_status: int = 400

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Not found ===


class OfferNotFoundError(DomainError):
    http_status = 404

    def __init__(self, offer_id: int):
        super().__init__(message=f"Offer {offer_id} not found.", code="OFFER_NOT_FOUND")
        self.offer_id = offer_id


class BookingNotFoundError(DomainError):
    http_status = 404

    def __init__(self, booking_id: int):
        super().__init__(message=f"Booking {booking_id} not found.", code="BOOKING_NOT_FOUND")
        self.booking_id = booking_id


class ContractNotFoundError(DomainError):
    http_status = 404

    def __init__(self, contract_id: int | None = None, booking_id: int | None = None):
        if contract_id is not None:
            message = f"Rental contract {contract_id} not found."
        else:
            message = f"No rental contract found for booking {booking_id}."
        super().__init__(message=message, code="CONTRACT_NOT_FOUND")
        self.contract_id = contract_id
        self.booking_id = booking_id


class UserNotFoundError(DomainError):
    http_status = 404

    def __init__(self, user_id: int):
        super().__init__(message=f"User {user_id} not found.", code="USER_NOT_FOUND")
        self.user_id = user_id


# === Authorization ===


class NotOfferOwnerError(DomainError):
    """The caller tried to manage an offer it does not own."""

    http_status = 403

    def __init__(self, offer_id: int, user_id: int, action: str = "manage dates"):
        super().__init__(
            message=f"You are not allowed to {action} for this offer.",
            code="FORBIDDEN",
        )
        self.offer_id = offer_id
        self.user_id = user_id


class NotContractPartyError(DomainError):
    """The caller is neither lessor nor lessee of the contract."""

    http_status = 403

    def __init__(self, contract_id: int, user_id: int):
        super().__init__(
            message="You are not a party to this rental contract.",
            code="FORBIDDEN",
        )
        self.contract_id = contract_id
        self.user_id = user_id


class BookingAccessDeniedError(DomainError):
    http_status = 403

    def __init__(self, booking_id: int, user_id: int):
        super().__init__(
            message="You are not allowed to view this booking.",
            code="FORBIDDEN",
        )
        self.booking_id = booking_id
        self.user_id = user_id


# === Contract lifecycle ===


class ContractAlreadySignedError(DomainError):
    http_status = 409

    def __init__(self, contract_id: int, party: str):
        super().__init__(
            message=f"Contract has already been signed by the {party}.",
            code="CONTRACT_ALREADY_SIGNED",
        )
        self.contract_id = contract_id
        self.party = party


class InvalidContractStatusError(DomainError):
    """The contract status does not allow the requested operation."""

    http_status = 409

    def __init__(self, contract_id: int, current_status: str, operation: str):
        super().__init__(
            message=f"Cannot {operation} contract {contract_id}: current status '{current_status}'.",
            code="INVALID_CONTRACT_STATUS",
        )
        self.contract_id = contract_id
        self.current_status = current_status
        self.operation = operation


class InvalidBookingStatusError(DomainError):
    http_status = 409

    def __init__(self, booking_id: int, current_status: str, operation: str):
        super().__init__(
            message=f"Cannot {operation} booking {booking_id}: current status '{current_status}'.",
            code="INVALID_BOOKING_STATUS",
        )
        self.booking_id = booking_id
        self.current_status = current_status
        self.operation = operation


# === Pricing / dates ===


class PricingError(DomainError):
    """The offer carries neither a daily nor an hourly price."""

    def __init__(self, offer_id: int):
        super().__init__(message="Offer has no valid price.", code="PRICING_ERROR")
        self.offer_id = offer_id


class InvalidDateRangeError(DomainError):
    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")


class InvalidDateFormatError(DomainError):
    def __init__(self, value: str):
        super().__init__(
            message="Invalid date format. Use YYYY-MM-DD.",
            code="INVALID_DATE_FORMAT",
        )
        self.value = value


# === Booking ledger ===


class BookingOverlapError(DomainError):
    """Raised by the booking ledger when a write would double-book a day."""

    http_status = 409

    def __init__(self, offer_id: int, day: date | None = None):
        super().__init__(
            message="Selected period is not available.",
            code="NOT_AVAILABLE",
        )
        self.offer_id = offer_id
        self.day = day
