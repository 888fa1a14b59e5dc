"""Contact use cases (list, lookup, create, update, delete)."""

from __future__ import annotations

import logging
from typing import Optional

from contacts_api.db.models import Contact
from contacts_api.domain.results import ServiceResult, unexpected_failure
from contacts_api.repositories.contact_repository import ContactAssignedToFundError, ContactRepository
from contacts_api.repositories.ports import ContactStore

logger = logging.getLogger(__name__)

CONTACT_NOT_FOUND = "Contact not found."
CONTACT_IN_FUND = "Cannot delete contact assigned to a fund."


class ContactService:
    """Wraps the contact repository and reports outcomes as ServiceResult values."""

    def __init__(self, repository: ContactStore | None = None) -> None:
        self.repository = repository or ContactRepository()

    def list_contacts(self) -> ServiceResult[list[Contact]]:
        try:
            return ServiceResult.success(self.repository.list_contacts())
        except Exception as exc:
            return unexpected_failure(logger, "retrieving contacts", exc)

    def get_contact(self, contact_id: int) -> ServiceResult[Contact]:
        try:
            contact = self.repository.get_contact(contact_id)
        except Exception as exc:
            return unexpected_failure(logger, "retrieving the contact", exc)
        if contact is None:
            return ServiceResult.not_found(CONTACT_NOT_FOUND)
        return ServiceResult.success(contact)

    def create_contact(
        self, name: str, email: Optional[str] = None, phone: Optional[str] = None
    ) -> ServiceResult[Contact]:
        try:
            contact = self.repository.add_contact(name, email=email, phone=phone)
        except ValueError as exc:
            return ServiceResult.invalid(str(exc), [str(exc)])
        except Exception as exc:
            return unexpected_failure(logger, "creating the contact", exc)
        logger.info("Created contact %s", contact.id)
        return ServiceResult.success(contact)

    def update_contact(
        self, contact_id: int, name: str, email: Optional[str] = None, phone: Optional[str] = None
    ) -> ServiceResult[Contact]:
        try:
            contact = self.repository.update_contact(contact_id, name=name, email=email, phone=phone)
        except ValueError as exc:
            return ServiceResult.invalid(str(exc), [str(exc)])
        except Exception as exc:
            return unexpected_failure(logger, "updating the contact", exc)
        if contact is None:
            return ServiceResult.not_found(CONTACT_NOT_FOUND)
        return ServiceResult.success(contact)

    def delete_contact(self, contact_id: int) -> ServiceResult[bool]:
        try:
            contact = self.repository.get_contact(contact_id)
            if contact is None:
                return ServiceResult.not_found(CONTACT_NOT_FOUND)
            if contact.fund_id is not None:
                return ServiceResult.rule_violation(CONTACT_IN_FUND)
            deleted = self.repository.delete_contact(contact_id)
        except ContactAssignedToFundError:
            # assigned between the lookup and the delete
            return ServiceResult.rule_violation(CONTACT_IN_FUND)
        except Exception as exc:
            return unexpected_failure(logger, "deleting the contact", exc)
        if not deleted:
            return ServiceResult.not_found(CONTACT_NOT_FOUND)
        logger.info("Deleted contact %s", contact_id)
        return ServiceResult.success(True)
