# app/services/staff_service.py
import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.auth import create_access_token, hash_password, verify_password
from app.models.staff import Staff
from app.repositories.staff_repo import StaffRepository
from app.schemas.staff import StaffAuthResponse, StaffLogin, StaffRead, StaffRegister

logger = logging.getLogger(__name__)


class StaffService:
    """
    Admin staff accounts: email + bcrypt password, JWT on success.
    """

    def __init__(self, repo: StaffRepository):
        self.repo = repo

    @staticmethod
    def _auth_response(staff: Staff) -> StaffAuthResponse:
        token = create_access_token({"staff_id": staff.id, "role": staff.role})
        return StaffAuthResponse(staff=StaffRead.model_validate(staff), token=token)

    def register(self, session: Session, payload: StaffRegister) -> StaffAuthResponse:
        email = payload.email.lower()
        if self.repo.get_by_email(session, email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Staff with this email already exists",
            )

        staff = Staff(
            name=payload.name,
            email=email,
            phone=payload.phone,
            role=payload.role,
            password_hash=hash_password(payload.password),
        )
        try:
            staff = self.repo.create(session, staff)
        except IntegrityError:
            session.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Staff with this email already exists",
            )

        logger.info("Staff %s registered", staff.id)
        return self._auth_response(staff)

    def login(self, session: Session, payload: StaffLogin) -> StaffAuthResponse:
        staff = self.repo.get_by_email(session, payload.email.lower())
        # Same answer for unknown email and wrong password.
        if (
            staff is None
            or not staff.is_active
            or not verify_password(payload.password, staff.password_hash)
        ):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid credentials",
            )
        return self._auth_response(staff)
