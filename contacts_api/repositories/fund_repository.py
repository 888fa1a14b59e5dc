"""Fund persistence and fund membership changes."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from contacts_api.db.models import Contact, Fund
from contacts_api.db.session import get_session


class FundRepository:
    """CRUD helpers for funds. Membership lives on ``Contact.fund_id``."""

    def list_funds(self) -> list[Fund]:
        with get_session() as session:
            return list(session.execute(select(Fund).order_by(Fund.id)).scalars().all())

    def get_fund(self, fund_id: int) -> Optional[Fund]:
        with get_session() as session:
            return session.get(Fund, fund_id)

    def get_fund_with_contacts(self, fund_id: int) -> Optional[Fund]:
        with get_session() as session:
            stmt = select(Fund).options(selectinload(Fund.contacts)).where(Fund.id == fund_id)
            return session.execute(stmt).scalar_one_or_none()

    def add_fund(self, name: str) -> Fund:
        entity = Fund(name=(name or "").strip())
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def list_fund_contacts(self, fund_id: int) -> list[Contact]:
        with get_session() as session:
            stmt = select(Contact).where(Contact.fund_id == fund_id).order_by(Contact.id)
            return list(session.execute(stmt).scalars().all())

    def add_contact_to_fund(self, fund_id: int, contact_id: int) -> bool:
        with get_session() as session:
            if session.get(Fund, fund_id) is None:
                return False
            contact = session.get(Contact, contact_id)
            if contact is None or contact.fund_id == fund_id:
                return False
            contact.fund_id = fund_id
            session.commit()
            return True

    def remove_contact_from_fund(self, fund_id: int, contact_id: int) -> bool:
        with get_session() as session:
            contact = session.get(Contact, contact_id)
            if contact is None or contact.fund_id != fund_id:
                return False
            contact.fund_id = None
            session.commit()
            return True
