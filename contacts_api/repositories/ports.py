"""Repository interfaces the services depend on."""
from __future__ import annotations

from typing import Optional, Protocol

from contacts_api.db.models import Contact, Fund


class ContactStore(Protocol):
    def list_contacts(self) -> list[Contact]:
        ...

    def get_contact(self, contact_id: int) -> Optional[Contact]:
        ...

    def add_contact(self, name: str, email: str | None = None, phone: str | None = None) -> Contact:
        ...

    def update_contact(
        self,
        contact_id: int,
        *,
        name: str,
        email: str | None = None,
        phone: str | None = None,
        fund_id: int | None = None,
    ) -> Optional[Contact]:
        """Replace name/email/phone. A ``fund_id`` of None keeps the current assignment."""
        ...

    def delete_contact(self, contact_id: int) -> bool:
        """False when absent; raises ContactAssignedToFundError when the contact has a fund."""
        ...


class FundStore(Protocol):
    def list_funds(self) -> list[Fund]:
        ...

    def get_fund(self, fund_id: int) -> Optional[Fund]:
        ...

    def get_fund_with_contacts(self, fund_id: int) -> Optional[Fund]:
        ...

    def list_fund_contacts(self, fund_id: int) -> list[Contact]:
        ...

    def add_contact_to_fund(self, fund_id: int, contact_id: int) -> bool:
        ...

    def remove_contact_from_fund(self, fund_id: int, contact_id: int) -> bool:
        ...
