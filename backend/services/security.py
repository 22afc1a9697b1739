"""
Security helpers for the verification endpoint.
Verification requests are anonymous, so the client address and the submitted
email are all that identify who asked; both go into every security event.
"""
from typing import Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

class SecurityUtils:
    """Helpers for identifying requesters and recording verification events."""

    @staticmethod
    def get_client_ip(request) -> str:
        """Address of the requester, preferring proxy headers over the socket peer."""
        forwarded_ips = request.headers.get("X-Forwarded-For")
        if forwarded_ips:
            # Leftmost entry is the client, the rest are proxies
            return forwarded_ips.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        return request.client.host if request.client else "unknown"

    @staticmethod
    def sanitize_email(email: str) -> str:
        """
        Lowercase a validated address for lookups and the sender handoff.
        Surrounding whitespace is not stripped: padded input already fails validation.
        """
        if not email:
            return ""
        return email.lower()

    @staticmethod
    def log_security_event(event_type: str, details: dict, user_email: Optional[str] = None,
                          client_ip: Optional[str] = None):
        """
        Record an event worth auditing in the verification flow: requests for
        unknown or already verified accounts, accepted handoffs, and rejected
        HTTP requests. The API reply hides these distinctions; the log keeps them.
        """
        log_entry = {
            "timestamp": SecurityUtils.get_utc_now().isoformat(),
            "event_type": event_type,
            "user_email": user_email,
            "client_ip": client_ip,
            "details": details
        }
        logger.info(f"SECURITY_EVENT: {log_entry}")

    @staticmethod
    def get_utc_now() -> datetime:
        return datetime.now(timezone.utc)
