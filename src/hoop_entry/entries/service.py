from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from ..common.validators import as_bool, optional_text, parse_int_prefix, require_choice, require_int_in_range
from ..core.constants import CHILD_AGE_LIMIT, MAX_AGE, MIN_AGE
from ..core.enums import Gender, PaymentMethod
from ..core.exceptions import ValidationError
from ..tickets.factory import calculate_ticket_details
from ..tickets.model import TicketDecision
from .ledger import EntryLedger
from .model import NewEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryForm:
    """Raw attendee form values as submitted (strings/bools, not yet validated)."""

    age: object
    gender: object = Gender.MALE.value
    payment_method: object = PaymentMethod.CASH.value
    is_student: object = False
    student_card_verified: object = False
    name: object = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "EntryForm":
        """Accept both the JSON API's camelCase keys and snake_case form fields."""

        def pick(*keys, default=None):
            for k in keys:
                if k in data:
                    return data[k]
            return default

        return cls(
            age=pick("age"),
            gender=pick("gender"),
            payment_method=pick("paymentMethod", "payment_method"),
            is_student=pick("isStudent", "is_student", default=False),
            student_card_verified=pick("studentCardVerified", "student_card_verified", default=False),
            name=pick("name"),
        )


class EntryService:
    """Use case: check an attendee in from the entry form."""

    def __init__(self, ledger: EntryLedger):
        self._ledger = ledger

    def preview(self, age, is_student, student_card_verified) -> Optional[TicketDecision]:
        """Ticket the form would issue right now, or None while age is not numeric."""
        parsed = parse_int_prefix(age)
        if parsed is None:
            return None
        return calculate_ticket_details(parsed, as_bool(is_student), as_bool(student_card_verified))

    def submit(self, form: EntryForm) -> TicketDecision:
        age = require_int_in_range(
            form.age,
            min_value=MIN_AGE,
            max_value=MAX_AGE,
            invalid_message="Please enter a valid age",
            range_message=f"Please enter a valid age between {MIN_AGE} and {MAX_AGE}",
        )
        gender = require_choice(form.gender, Gender, "Please select a gender")
        payment_method = require_choice(form.payment_method, PaymentMethod, "Please select a payment method")
        is_student = as_bool(form.is_student)
        verified = as_bool(form.student_card_verified)

        if is_student and not verified and age >= CHILD_AGE_LIMIT:
            raise ValidationError("Please verify the student card or uncheck the student option")

        decision = calculate_ticket_details(age, is_student, verified)
        self._ledger.append(
            NewEntry(
                name=optional_text(form.name),
                age=age,
                gender=gender,
                is_student=is_student,
                student_card_verified=verified,
                ticket_type=decision.ticket_type,
                ticket_price=decision.price,
                payment_method=payment_method,
            )
        )
        logger.debug("entry appended: %s %s", decision.ticket_type.value, decision.price)
        return decision

    def reset(self, *, confirmed: bool) -> None:
        if not confirmed:
            raise ValidationError("Reset must be confirmed")
        self._ledger.clear()
