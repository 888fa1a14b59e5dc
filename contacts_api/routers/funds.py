"""Fund lookup and fund membership endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from contacts_api.core.envelope import fail_body, result_response
from contacts_api.domain.validation import MAX_ID, contact_id_errors
from contacts_api.schemas.contact import dump_contacts
from contacts_api.schemas.fund import AddContactToFundRequest, dump_fund_detail, dump_fund_summaries
from contacts_api.services.fund_service import FundService

router = APIRouter(prefix="/funds", tags=["funds"])


def get_fund_service(request: Request) -> FundService:
    svc = getattr(getattr(request.app, "state", None), "fund_service", None)
    if not svc:
        raise RuntimeError("FundService not configured")
    return svc


@router.get("", summary="Get all funds")
def list_funds(svc: FundService = Depends(get_fund_service)):
    return result_response(svc.list_funds(), message="Funds retrieved successfully.", serialize=dump_fund_summaries)


@router.get("/{fund_id}", summary="Get a fund and its contacts")
def get_fund(
    fund_id: int = Path(..., ge=1, le=MAX_ID), svc: FundService = Depends(get_fund_service)
):
    return result_response(svc.get_fund(fund_id), message="Fund retrieved successfully.", serialize=dump_fund_detail)


@router.get("/{fund_id}/contacts", summary="Get the contacts of a fund")
def list_fund_contacts(
    fund_id: int = Path(..., ge=1, le=MAX_ID), svc: FundService = Depends(get_fund_service)
):
    return result_response(
        svc.list_fund_contacts(fund_id), message="Fund contacts retrieved successfully.", serialize=dump_contacts
    )


@router.post("/{fund_id}/contacts", summary="Add a contact to a fund")
def add_contact_to_fund(
    payload: AddContactToFundRequest,
    fund_id: int = Path(..., ge=1, le=MAX_ID),
    svc: FundService = Depends(get_fund_service),
):
    errors = contact_id_errors(payload.contact_id)
    if errors:
        return JSONResponse(fail_body("Validation failed", errors), status_code=400)
    result = svc.add_contact_to_fund(fund_id, payload.contact_id)
    return result_response(result, message="Contact added to fund successfully.", serialize=lambda _: None)


@router.delete("/{fund_id}/contacts/{contact_id}", summary="Remove a contact from a fund")
def remove_contact_from_fund(
    fund_id: int = Path(..., ge=1, le=MAX_ID),
    contact_id: int = Path(..., ge=1, le=MAX_ID),
    svc: FundService = Depends(get_fund_service),
):
    result = svc.remove_contact_from_fund(fund_id, contact_id)
    return result_response(result, message="Contact removed from fund successfully.", serialize=lambda _: None)
