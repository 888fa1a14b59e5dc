from __future__ import annotations

from contacts_api.domain.results import ErrorKind
from contacts_api.repositories.contact_repository import ContactRepository
from contacts_api.repositories.fund_repository import FundRepository
from contacts_api.services.fund_service import FundService


def _contact(name="Ann"):
    return ContactRepository().add_contact(name)


def test_list_and_get_funds(funds):
    alpha, _ = funds
    svc = FundService()
    contact = _contact()
    svc.add_contact_to_fund(alpha.id, contact.id)

    assert [f.name for f in svc.list_funds().value] == ["Alpha Fund", "Beta Fund"]
    fund = svc.get_fund(alpha.id).value
    assert [c.id for c in fund.contacts] == [contact.id]

    missing = svc.get_fund(99)
    assert missing.kind is ErrorKind.NOT_FOUND
    assert missing.message == "Fund not found."


def test_list_fund_contacts(funds):
    alpha, beta = funds
    svc = FundService()
    contact = _contact()
    svc.add_contact_to_fund(beta.id, contact.id)

    assert svc.list_fund_contacts(alpha.id).value == []
    assert [c.id for c in svc.list_fund_contacts(beta.id).value] == [contact.id]
    assert svc.list_fund_contacts(99).kind is ErrorKind.NOT_FOUND


def test_add_contact_to_missing_fund(db_env):
    result = FundService().add_contact_to_fund(1, _contact().id)

    assert result.kind is ErrorKind.NOT_FOUND
    assert result.message == "Fund not found."
    assert not result.server_error


def test_add_missing_contact(funds):
    alpha, _ = funds
    result = FundService().add_contact_to_fund(alpha.id, 99)
    assert result.kind is ErrorKind.NOT_FOUND
    assert result.message == "Contact not found."


def test_adding_twice_to_same_fund_fails(funds):
    alpha, _ = funds
    svc = FundService()
    contact = _contact()

    assert svc.add_contact_to_fund(alpha.id, contact.id).ok
    second = svc.add_contact_to_fund(alpha.id, contact.id)

    assert second.kind is ErrorKind.BUSINESS_RULE
    assert second.message == "Contact is already assigned to this fund."


def test_moving_to_another_fund_requires_removal(funds):
    alpha, beta = funds
    svc = FundService()
    contact = _contact()
    svc.add_contact_to_fund(alpha.id, contact.id)

    moved = svc.add_contact_to_fund(beta.id, contact.id)
    assert moved.kind is ErrorKind.BUSINESS_RULE
    assert moved.message == "Contact is already assigned to another fund."
    assert ContactRepository().get_contact(contact.id).fund_id == alpha.id

    assert svc.remove_contact_from_fund(alpha.id, contact.id).ok
    assert svc.add_contact_to_fund(beta.id, contact.id).ok
    assert ContactRepository().get_contact(contact.id).fund_id == beta.id


def test_remove_from_wrong_fund_does_not_mutate(funds):
    alpha, beta = funds
    svc = FundService()
    contact = _contact()
    svc.add_contact_to_fund(beta.id, contact.id)

    result = svc.remove_contact_from_fund(alpha.id, contact.id)

    assert result.kind is ErrorKind.BUSINESS_RULE
    assert "may not be assigned to this fund" in result.message
    assert ContactRepository().get_contact(contact.id).fund_id == beta.id


def test_remove_from_missing_fund(db_env):
    result = FundService().remove_contact_from_fund(3, _contact().id)
    assert result.kind is ErrorKind.NOT_FOUND


def test_repository_refusal_is_reported(funds, monkeypatch):
    alpha, _ = funds
    contact = _contact()
    monkeypatch.setattr(FundRepository, "add_contact_to_fund", lambda self, f, c: False)

    result = FundService().add_contact_to_fund(alpha.id, contact.id)

    assert result.kind is ErrorKind.BUSINESS_RULE
    assert result.message == "Failed to add contact to fund."


def test_store_failures_become_server_errors(funds, monkeypatch):
    alpha, _ = funds

    def _boom(*args, **kwargs):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(FundRepository, "list_funds", _boom)
    monkeypatch.setattr(FundRepository, "get_fund", _boom)
    monkeypatch.setattr(FundRepository, "get_fund_with_contacts", _boom)
    svc = FundService()

    for result, action in (
        (svc.list_funds(), "retrieving funds"),
        (svc.get_fund(alpha.id), "retrieving the fund"),
        (svc.list_fund_contacts(alpha.id), "retrieving the fund contacts"),
        (svc.add_contact_to_fund(alpha.id, 1), "adding the contact to the fund"),
        (svc.remove_contact_from_fund(alpha.id, 1), "removing the contact from the fund"),
    ):
        assert result.server_error
        assert result.message == f"An error occurred while {action}."
        assert result.errors == ["connection reset"]
