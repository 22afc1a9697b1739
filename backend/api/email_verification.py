from fastapi import APIRouter, Depends, HTTPException, Request
from services.identity_store import IdentityStore
from services.security import SecurityUtils
from services.verification import (
    InvalidVerificationRequest,
    LoggingVerificationSender,
    VerificationSender,
    VerificationService,
)
from schemas.email_verification import VerificationRequest, VerificationResponse

router = APIRouter()

def get_identity_store(request: Request) -> IdentityStore:
    return request.app.state.identity_store

def get_verification_sender() -> VerificationSender:
    return LoggingVerificationSender()

def get_verification_service(
    store: IdentityStore = Depends(get_identity_store),
    sender: VerificationSender = Depends(get_verification_sender)
) -> VerificationService:
    return VerificationService(store, sender)

@router.post("/verify-email", response_model=VerificationResponse)
async def verify_email(
    data: VerificationRequest,
    request: Request,
    service: VerificationService = Depends(get_verification_service)
):
    """Validate the submitted email and hand it off for verification."""
    try:
        return await service.request_verification(data, client_ip=SecurityUtils.get_client_ip(request))
    except InvalidVerificationRequest as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "Invalid verification request", "errors": e.result.as_field_errors()}
        )
