"""Contact persistence backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from contacts_api.db.models import Contact
from contacts_api.db.session import get_session


class ContactAssignedToFundError(Exception):
    """Raised when deleting a contact that still belongs to a fund."""

    def __init__(self, contact_id: int, fund_id: int):
        super().__init__("Cannot delete a contact that is assigned to a fund.")
        self.contact_id = contact_id
        self.fund_id = fund_id


def _clean(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


class ContactRepository:
    """CRUD helpers for the contacts table."""

    def list_contacts(self) -> list[Contact]:
        with get_session() as session:
            return list(session.execute(select(Contact).order_by(Contact.id)).scalars().all())

    def get_contact(self, contact_id: int) -> Optional[Contact]:
        with get_session() as session:
            return session.get(Contact, contact_id)

    def add_contact(self, name: str, email: str | None = None, phone: str | None = None) -> Contact:
        name_value = (name or "").strip()
        if not name_value:
            raise ValueError("Contact name is required.")
        entity = Contact(name=name_value, email=_clean(email), phone=_clean(phone), fund_id=None)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update_contact(
        self,
        contact_id: int,
        *,
        name: str,
        email: str | None = None,
        phone: str | None = None,
        fund_id: int | None = None,
    ) -> Optional[Contact]:
        name_value = (name or "").strip()
        if not name_value:
            raise ValueError("Contact name is required.")
        with get_session() as session:
            contact = session.get(Contact, contact_id)
            if not contact:
                return None
            contact.name = name_value
            contact.email = _clean(email)
            contact.phone = _clean(phone)
            if fund_id is not None:
                contact.fund_id = fund_id
            session.commit()
            session.refresh(contact)
            return contact

    def delete_contact(self, contact_id: int) -> bool:
        with get_session() as session:
            contact = session.get(Contact, contact_id)
            if not contact:
                return False
            if contact.fund_id is not None:
                raise ContactAssignedToFundError(contact.id, contact.fund_id)
            session.delete(contact)
            session.commit()
            return True
