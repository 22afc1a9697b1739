"""
Email verification request handling.
Only requests that pass validation are handed to the verification sender.
"""
from typing import Optional, Protocol
import logging

from dao.user_dao import UserDAO
from schemas.email_verification import VerificationRequest, VerificationResponse, ValidationResult
from services.identity_store import IdentityStore
from services.security import SecurityUtils
from services.validation import validate

logger = logging.getLogger(__name__)

# Same reply whatever the account state, to avoid user enumeration
VERIFICATION_REQUESTED_MESSAGE = "If an account exists for this email, a verification email has been sent."

class VerificationSender(Protocol):
    async def send_verification(self, email: str) -> None:
        ...

class LoggingVerificationSender:
    """Default sender. Records the handoff instead of delivering mail."""

    async def send_verification(self, email: str) -> None:
        logger.info(f"Verification email handoff (simulated) for {email}")

class InvalidVerificationRequest(Exception):
    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__("; ".join(issue.message for issue in result.issues))

class VerificationService:
    def __init__(self, store: IdentityStore, sender: VerificationSender):
        self.store = store
        self.sender = sender

    async def request_verification(self, request: VerificationRequest,
                                   client_ip: Optional[str] = None) -> VerificationResponse:
        result = validate(request)
        if not result.is_valid:
            raise InvalidVerificationRequest(result)

        email = SecurityUtils.sanitize_email(result.email)

        async with self.store.session() as db:
            user = await UserDAO(db).get_by_email(email)

        if not user:
            SecurityUtils.log_security_event(
                "verification_request_nonexistent_user",
                {},
                user_email=email,
                client_ip=client_ip
            )
        elif user.is_verified:
            SecurityUtils.log_security_event(
                "verification_request_already_verified",
                {"user_id": user.id},
                user_email=email,
                client_ip=client_ip
            )
        else:
            await self.sender.send_verification(email)
            SecurityUtils.log_security_event(
                "verification_email_requested",
                {"user_id": user.id},
                user_email=email,
                client_ip=client_ip
            )

        return VerificationResponse(message=VERIFICATION_REQUESTED_MESSAGE)
