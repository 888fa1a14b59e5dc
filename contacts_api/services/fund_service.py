"""
Fund use cases, including the membership rules.

A contact belongs to at most one fund. Moving it means removing it from the
current fund first; adding it again to the fund it already belongs to is
rejected rather than treated as a no-op.
"""

from __future__ import annotations

import logging

from contacts_api.db.models import Contact, Fund
from contacts_api.domain.results import ServiceResult, unexpected_failure
from contacts_api.repositories.contact_repository import ContactRepository
from contacts_api.repositories.fund_repository import FundRepository
from contacts_api.repositories.ports import ContactStore, FundStore

logger = logging.getLogger(__name__)

FUND_NOT_FOUND = "Fund not found."
CONTACT_NOT_FOUND = "Contact not found."
ALREADY_IN_FUND = "Contact is already assigned to this fund."
IN_ANOTHER_FUND = "Contact is already assigned to another fund."
ADD_FAILED = "Failed to add contact to fund."
NOT_IN_FUND = "Failed to remove contact from fund. The contact may not be assigned to this fund."


class FundService:
    def __init__(
        self,
        fund_repository: FundStore | None = None,
        contact_repository: ContactStore | None = None,
    ) -> None:
        self.fund_repository = fund_repository or FundRepository()
        self.contact_repository = contact_repository or ContactRepository()

    def list_funds(self) -> ServiceResult[list[Fund]]:
        try:
            return ServiceResult.success(self.fund_repository.list_funds())
        except Exception as exc:
            return unexpected_failure(logger, "retrieving funds", exc)

    def get_fund(self, fund_id: int) -> ServiceResult[Fund]:
        """Return the fund with its contacts loaded."""
        try:
            fund = self.fund_repository.get_fund_with_contacts(fund_id)
        except Exception as exc:
            return unexpected_failure(logger, "retrieving the fund", exc)
        if fund is None:
            return ServiceResult.not_found(FUND_NOT_FOUND)
        return ServiceResult.success(fund)

    def list_fund_contacts(self, fund_id: int) -> ServiceResult[list[Contact]]:
        try:
            if self.fund_repository.get_fund(fund_id) is None:
                return ServiceResult.not_found(FUND_NOT_FOUND)
            return ServiceResult.success(self.fund_repository.list_fund_contacts(fund_id))
        except Exception as exc:
            return unexpected_failure(logger, "retrieving the fund contacts", exc)

    def add_contact_to_fund(self, fund_id: int, contact_id: int) -> ServiceResult[bool]:
        try:
            if self.fund_repository.get_fund(fund_id) is None:
                return ServiceResult.not_found(FUND_NOT_FOUND)
            contact = self.contact_repository.get_contact(contact_id)
            if contact is None:
                return ServiceResult.not_found(CONTACT_NOT_FOUND)
            if contact.fund_id == fund_id:
                return ServiceResult.rule_violation(ALREADY_IN_FUND)
            if contact.fund_id is not None:
                return ServiceResult.rule_violation(IN_ANOTHER_FUND)
            added = self.fund_repository.add_contact_to_fund(fund_id, contact_id)
        except Exception as exc:
            return unexpected_failure(logger, "adding the contact to the fund", exc)
        if not added:
            return ServiceResult.rule_violation(ADD_FAILED)
        logger.info("Added contact %s to fund %s", contact_id, fund_id)
        return ServiceResult.success(True)

    def remove_contact_from_fund(self, fund_id: int, contact_id: int) -> ServiceResult[bool]:
        try:
            if self.fund_repository.get_fund(fund_id) is None:
                return ServiceResult.not_found(FUND_NOT_FOUND)
            removed = self.fund_repository.remove_contact_from_fund(fund_id, contact_id)
        except Exception as exc:
            return unexpected_failure(logger, "removing the contact from the fund", exc)
        if not removed:
            return ServiceResult.rule_violation(NOT_IN_FUND)
        logger.info("Removed contact %s from fund %s", contact_id, fund_id)
        return ServiceResult.success(True)
