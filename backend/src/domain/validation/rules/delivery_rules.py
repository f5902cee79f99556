"""Delivery information checks"""

import re
from typing import Optional

from domain.orders.models import DeliveryInfo
from domain.shipping.tiering import is_rush_zone
from domain.validation.models import ValidationContext, ValidationIssue, ValidationSeverity
from domain.validation.results import DeliveryValidationResult


EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_PATTERN = re.compile(r"^(\+84|0)[0-9]{9,10}$")

_REQUIRED_FIELDS = (
    ("recipient_name", "deliveryInfo.recipientName", "RECIPIENT_NAME_MISSING", "Recipient name is required"),
    ("phone_number", "deliveryInfo.phoneNumber", "PHONE_NUMBER_MISSING", "Phone number is required"),
    ("address", "deliveryInfo.address", "ADDRESS_MISSING", "Delivery address is required"),
    ("province_city", "deliveryInfo.city", "CITY_MISSING", "City/Province is required"),
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def wants_rush(delivery: DeliveryInfo) -> bool:
    return delivery.rush_requested or (delivery.delivery_method or "").upper().startswith("RUSH")


def validate_delivery_info(
    delivery: Optional[DeliveryInfo],
    context: Optional[ValidationContext] = None
) -> DeliveryValidationResult:
    """Validate recipient, contact and address data.

    Missing required fields are errors; malformed phone numbers or emails are
    warnings. When rush delivery is requested the rush-zone eligibility is
    recorded and an INFO issue is added for addresses outside the zone.
    """
    result = DeliveryValidationResult()

    if delivery is None:
        result.add_issue(ValidationIssue(
            field="deliveryInfo",
            code="DELIVERY_INFO_NULL",
            message="Delivery information is required",
            severity=ValidationSeverity.ERROR,
            user_message="Please provide delivery information",
            possible_fixes=("Complete delivery address form",),
        ))
        result.address_validation_status = "MISSING"
        return result

    result.delivery_method = delivery.delivery_method

    for attribute, field_path, code, message in _REQUIRED_FIELDS:
        if _is_blank(getattr(delivery, attribute)):
            result.add_error(field_path, code, message)

    if not _is_blank(delivery.phone_number):
        clean_phone = re.sub(r"[\s.\-()]", "", delivery.phone_number)
        if not PHONE_PATTERN.match(clean_phone):
            result.add_issue(ValidationIssue(
                field="deliveryInfo.phoneNumber",
                code="PHONE_NUMBER_FORMAT",
                message="Phone number format is not recognized",
                severity=ValidationSeverity.WARNING,
                actual_value=delivery.phone_number,
                possible_fixes=("Use a number starting with 0 or +84",),
            ))

    if not _is_blank(delivery.email) and not EMAIL_PATTERN.match(delivery.email.strip()):
        result.add_issue(ValidationIssue(
            field="deliveryInfo.email",
            code="EMAIL_FORMAT",
            message="Email address format is invalid",
            severity=ValidationSeverity.WARNING,
            actual_value=delivery.email,
        ))

    result.address_validation_status = "INCOMPLETE" if result.has_errors() else "COMPLETE"

    if wants_rush(delivery):
        result.rush_delivery_eligible = is_rush_zone(delivery.province_city)
        if not result.rush_delivery_eligible:
            result.add_info(
                "deliveryInfo.city",
                "RUSH_NOT_AVAILABLE",
                f"Rush delivery is not available for '{delivery.province_city}'"
            )
            result.add_recovery_suggestion("Choose standard delivery for this address")

    return result
