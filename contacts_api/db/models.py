"""SQLAlchemy models for funds and their contacts."""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .session import Base


class Fund(Base):
    __tablename__ = "funds"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, default="")

    # derived from Contact.fund_id; the contact row is the only place membership is stored
    contacts = relationship("Contact", back_populates="fund", order_by="Contact.id")


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(64), nullable=True)
    fund_id = Column(Integer, ForeignKey("funds.id"), nullable=True, index=True)

    fund = relationship("Fund", back_populates="contacts")
