"""
Scholarship eligibility rules keyed on CTC and the model's alignment flag.
"""
import logging
from decimal import Decimal, InvalidOperation

from ..errors import InvalidCompensationError
from ..models.schemas import EligibilityDecision, EligibilityStatus

logger = logging.getLogger(__name__)

FLAT_AWARD_CEILING = Decimal("6.9")  # LPA, inclusive
ALIGNMENT_BAND_CEILING = Decimal("13")  # LPA, inclusive

FULL_AWARD = 25000
BASE_AWARD = 15000


def parse_compensation(raw: str | None) -> Decimal:
    """Parse the submitted CTC (LPA) into a finite, non-negative Decimal."""
    text = (raw or "").strip()
    if not text:
        raise InvalidCompensationError("CTC is required.")
    try:
        value = Decimal(text)
    except InvalidOperation as e:
        raise InvalidCompensationError(f"CTC must be a number, got {text!r}.") from e
    if not value.is_finite():
        raise InvalidCompensationError(f"CTC must be a finite number, got {text!r}.")
    if value < 0:
        raise InvalidCompensationError("CTC cannot be negative.")
    return value


def decide_scholarship(compensation: Decimal, highly_aligned: bool) -> EligibilityDecision:
    """Map (CTC in LPA, alignment flag) to the scholarship award."""
    if compensation <= FLAT_AWARD_CEILING:
        decision = EligibilityDecision(
            amount=FULL_AWARD,
            status=EligibilityStatus.ELIGIBLE,
            message="Hurray! You are eligible for a scholarship of 25,000/-.",
        )
    elif compensation <= ALIGNMENT_BAND_CEILING:
        if highly_aligned:
            decision = EligibilityDecision(
                amount=FULL_AWARD,
                status=EligibilityStatus.ELIGIBLE,
                message="Great news! You are eligible for a scholarship of 25,000/- based on your strong profile alignment!",
            )
        else:
            decision = EligibilityDecision(
                amount=BASE_AWARD,
                status=EligibilityStatus.ELIGIBLE,
                message="Good news! You are eligible for a scholarship of 15,000/-. Secure your spot now and don't miss out on the 25,000/- opportunity!",
            )
    elif highly_aligned:
        decision = EligibilityDecision(
            amount=BASE_AWARD,
            status=EligibilityStatus.ELIGIBLE,
            message="Congratulations! You're eligible for a 15,000/- scholarship based on your exceptional profile. Don't miss this chance to upskill!",
        )
    else:
        decision = EligibilityDecision(
            amount=0,
            status=EligibilityStatus.NOT_ELIGIBLE,
            message="Based on your current CTC and profile alignment, you are not eligible for a scholarship at this time.",
        )

    logger.debug(f"Decision for CTC={compensation}, aligned={highly_aligned}: {decision.amount} ({decision.status.name})")
    return decision
