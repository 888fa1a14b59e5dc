"""Pydantic schemas for funds and fund membership."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .contact import ContactRead, RequestModel, ResponseModel


class AddContactToFundRequest(RequestModel):
    contact_id: Optional[int] = Field(None, description="Id of the contact to add to the fund")


class FundSummary(ResponseModel):
    id: int
    name: str


class FundDetail(ResponseModel):
    id: int
    name: str
    contacts: List[ContactRead] = Field(default_factory=list)


def dump_fund_summaries(entities) -> list[dict]:
    return [FundSummary.model_validate(entity).model_dump(by_alias=True) for entity in entities]


def dump_fund_detail(entity) -> dict:
    return FundDetail.model_validate(entity).model_dump(by_alias=True)
