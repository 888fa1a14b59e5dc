"""Contact CRUD endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from contacts_api.core.config import get_settings
from contacts_api.core.envelope import fail_body, result_response
from contacts_api.domain.validation import MAX_ID, contact_errors
from contacts_api.schemas.contact import ContactRequest, dump_contact, dump_contacts
from contacts_api.services.contact_service import ContactService

router = APIRouter(prefix="/contacts", tags=["contacts"])


def get_contact_service(request: Request) -> ContactService:
    svc = getattr(getattr(request.app, "state", None), "contact_service", None)
    if not svc:
        raise RuntimeError("ContactService not configured")
    return svc


def _validation_failed(payload: ContactRequest) -> JSONResponse | None:
    errors = contact_errors(payload.name, payload.email, payload.phone)
    if errors:
        return JSONResponse(fail_body("Validation failed", errors), status_code=400)
    return None


@router.get("", summary="Get all contacts")
def list_contacts(svc: ContactService = Depends(get_contact_service)):
    return result_response(
        svc.list_contacts(), message="Contacts retrieved successfully.", serialize=dump_contacts
    )


@router.get("/{contact_id}", summary="Get contact by id")
def get_contact(
    contact_id: int = Path(..., ge=1, le=MAX_ID), svc: ContactService = Depends(get_contact_service)
):
    return result_response(
        svc.get_contact(contact_id), message="Contact retrieved successfully.", serialize=dump_contact
    )


@router.post("", status_code=201, summary="Create a new contact")
def create_contact(payload: ContactRequest, svc: ContactService = Depends(get_contact_service)):
    invalid = _validation_failed(payload)
    if invalid:
        return invalid
    result = svc.create_contact(payload.name, email=payload.email, phone=payload.phone)
    headers = None
    if result.ok:
        headers = {"Location": f"{get_settings().api_prefix}/contacts/{result.value.id}"}
    return result_response(
        result,
        message="Contact created successfully.",
        serialize=dump_contact,
        status_code=201,
        headers=headers,
    )


@router.put("/{contact_id}", summary="Update an existing contact")
def update_contact(
    payload: ContactRequest,
    contact_id: int = Path(..., ge=1, le=MAX_ID),
    svc: ContactService = Depends(get_contact_service),
):
    invalid = _validation_failed(payload)
    if invalid:
        return invalid
    result = svc.update_contact(contact_id, payload.name, email=payload.email, phone=payload.phone)
    return result_response(result, message="Contact updated successfully.", serialize=dump_contact)


@router.delete("/{contact_id}", status_code=204, summary="Delete a contact")
def delete_contact(
    contact_id: int = Path(..., ge=1, le=MAX_ID), svc: ContactService = Depends(get_contact_service)
):
    return result_response(svc.delete_contact(contact_id), message="Contact deleted successfully.", status_code=204)
