# app/repositories/staff_repo.py
from sqlmodel import Session, select

from app.models.staff import Staff


class StaffRepository:
    """
    Data access layer for Staff.
    """

    def get_by_id(self, session: Session, staff_id: int) -> Staff | None:
        return session.get(Staff, staff_id)

    def get_by_email(self, session: Session, email: str) -> Staff | None:
        stmt = select(Staff).where(Staff.email == email)
        return session.exec(stmt).first()

    def create(self, session: Session, staff: Staff) -> Staff:
        session.add(staff)
        session.commit()
        session.refresh(staff)
        return staff
