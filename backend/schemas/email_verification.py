"""
Pydantic schemas for the email verification request form.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from enum import Enum

EMAIL_FIELD = "Email"

class VerificationRequest(BaseModel):
    """Submitted verification form. The email is checked by services.validation, not here."""
    email: Optional[str] = None

class VerificationResponse(BaseModel):
    message: str

class ValidationErrorKind(str, Enum):
    MISSING_VALUE = "missing_value"
    INVALID_FORMAT = "invalid_format"

class ValidationIssue(BaseModel):
    field: str = EMAIL_FIELD
    kind: ValidationErrorKind
    message: str

class ValidationResult(BaseModel):
    """Outcome of checking a VerificationRequest."""
    issues: List[ValidationIssue] = Field(default_factory=list)
    # Normalized address, set only when the request is valid
    email: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def kinds(self) -> List[ValidationErrorKind]:
        return [issue.kind for issue in self.issues]

    def as_field_errors(self) -> Dict[str, List[str]]:
        """Group issue messages by form field name."""
        errors: Dict[str, List[str]] = {}
        for issue in self.issues:
            errors.setdefault(issue.field, []).append(issue.message)
        return errors
