"""Standard rental terms attached to every generated contract."""

from booking_engine.domain.constants import OFFER_TYPE_SERVICE

GENERAL_TERMS = """GENERAL RENTAL TERMS

1. SUBJECT OF THE CONTRACT
The lessor grants the lessee the use of the item or service described above under the agreed conditions.

2. RENTAL PERIOD AND PRICE
The rental period and the rental price follow from the contract details above. The total price is payable on handover.

3. DEPOSIT
The lessee provides a deposit in the amount stated above. The deposit is refunded once the rented item has been returned in proper condition.

4. OBLIGATIONS OF THE LESSEE
- Careful use in accordance with the intended purpose
- No subletting without the consent of the lessor
- Immediate notice of any damage or defect
- Punctual return in clean condition

5. LIABILITY
The lessee is liable for all damage arising during the rental period that results from improper handling or negligence.

6. RETURN
The rented item must be returned at the agreed time and in proper condition. Late returns may incur additional fees.

7. CANCELLATION
Cancellations must be made in good time. Cancellation conditions follow the general terms of the marketplace.

8. EXCLUSION OF LIABILITY
The lessor is not liable for damage caused by normal wear and tear or force majeure."""

SERVICE_TERMS = """

9. SPECIAL CONDITIONS FOR SERVICES
- The service is provided to the best of the provider's knowledge and ability
- Appointments must be rescheduled at least 24 hours in advance
- The full fee is charged for no-shows without prior notice"""

ITEM_TERMS = """

9. SPECIAL CONDITIONS FOR ITEMS
- The rented item remains the property of the lessor
- Technical instructions must be followed
- Consumables (e.g. fuel, oil) are borne by the lessee"""


def terms_for_offer_type(offer_type: str) -> str:
    """Boilerplate terms for an ``Item`` or ``Service`` offer."""
    if offer_type == OFFER_TYPE_SERVICE:
        return GENERAL_TERMS + SERVICE_TERMS
    return GENERAL_TERMS + ITEM_TERMS
