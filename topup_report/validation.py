"""Presence validation of raw JSON records and conversion into typed models."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence, Type

from .errors import CompaniesMissingFieldsError, MissingFieldsMixin, UsersMissingFieldsError
from .models import User

USER_FIELDS = (
    "id",
    "first_name",
    "last_name",
    "email",
    "company_id",
    "email_status",
    "active_status",
    "tokens",
)

COMPANY_FIELDS = ("id", "name", "top_up", "email_status")


def readable_list(names: Sequence[str]) -> str:
    """Join names the way a person would: ``a``, ``a and b``, ``a, b and c``."""
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} and {names[-1]}"


def missing_fields(required: Sequence[str], record: Dict[str, Any]) -> List[str]:
    # A JSON null counts as absent.
    return [name for name in required if record.get(name) is None]


def require_fields(
    required: Sequence[str],
    record: Dict[str, Any],
    error_cls: Type[MissingFieldsMixin],
) -> None:
    """Raise ``error_cls`` naming every required field absent from ``record``."""
    missing = missing_fields(required, record)
    if missing:
        raise error_cls(
            f"Invalid data for {json.dumps(record)}: missing {readable_list(missing)}",
            missing=missing,
            record=record,
        )


def parse_user(record: Dict[str, Any]) -> User:
    require_fields(USER_FIELDS, record, UsersMissingFieldsError)
    return User(**{name: record[name] for name in USER_FIELDS})


def parse_company_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a company record and return just its scalar fields.

    The owned users are attached later by the join, so this stops short
    of building a :class:`~topup_report.models.Company`.
    """
    require_fields(COMPANY_FIELDS, record, CompaniesMissingFieldsError)
    return {name: record[name] for name in COMPANY_FIELDS}
