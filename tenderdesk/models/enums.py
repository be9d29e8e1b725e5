"""Canonical enum values for the TenderDesk schema."""

from __future__ import annotations

import enum


class TenderStatus(str, enum.Enum):
    OPEN = "open"
    PENDING = "pending"
    CLOSED = "closed"
    AWARDED = "awarded"


class LeadStatus(str, enum.Enum):
    NEW = "New"
    CONTACTED = "Contacted"
    QUALIFIED = "Qualified"
    PROPOSAL = "Proposal"
    NEGOTIATION = "Negotiation"
    CLOSED = "Closed"


class ActivityType(str, enum.Enum):
    CREATE_TENDER = "CREATE_TENDER"
    UPDATE_TENDER = "UPDATE_TENDER"
    DELETE_TENDER = "DELETE_TENDER"
    CREATE_COMPANY = "CREATE_COMPANY"
    UPDATE_COMPANY = "UPDATE_COMPANY"
    DELETE_COMPANY = "DELETE_COMPANY"
    CREATE_CUSTOMER = "CREATE_CUSTOMER"
    UPDATE_CUSTOMER = "UPDATE_CUSTOMER"
    DELETE_CUSTOMER = "DELETE_CUSTOMER"
    CREATE_LEAD = "CREATE_LEAD"
    UPDATE_LEAD = "UPDATE_LEAD"
    DELETE_LEAD = "DELETE_LEAD"
