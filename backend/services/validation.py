"""
Validation of email verification requests.
Checks are pure: no I/O, no logging, safe to call from any number of requests.
"""
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from schemas.email_verification import (
    VerificationRequest,
    ValidationErrorKind,
    ValidationIssue,
    ValidationResult,
)

MISSING_EMAIL_MESSAGE = "Email is required."
INVALID_EMAIL_MESSAGE = "Email is not a valid email address."

def validate_email_value(value: Optional[str]) -> ValidationResult:
    """
    Check a raw email value.
    A missing value is reported as MISSING_VALUE only; the format check
    runs only once a value is present.
    """
    if value is None or not value.strip():
        return ValidationResult(issues=[
            ValidationIssue(kind=ValidationErrorKind.MISSING_VALUE, message=MISSING_EMAIL_MESSAGE)
        ])

    try:
        # Syntax only, deliverability needs DNS
        checked = validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return ValidationResult(issues=[
            ValidationIssue(kind=ValidationErrorKind.INVALID_FORMAT, message=INVALID_EMAIL_MESSAGE)
        ])

    return ValidationResult(email=checked.normalized)

def validate(request: VerificationRequest) -> ValidationResult:
    return validate_email_value(request.email)
