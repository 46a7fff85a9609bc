"""Error taxonomy for loading the users and companies datasets."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple


class ReportError(Exception):
    """Base class for every fatal error raised while building the report."""


class UsersError(ReportError):
    """Loading ``users.json`` failed."""


class UsersFileNotFoundError(UsersError):
    pass


class UsersInvalidDataError(UsersError):
    pass


class UsersInvalidJSONError(UsersInvalidDataError):
    pass


class CompaniesError(ReportError):
    """Loading ``companies.json`` failed."""


class CompaniesFileNotFoundError(CompaniesError):
    pass


class CompaniesInvalidDataError(CompaniesError):
    pass


class CompaniesInvalidJSONError(CompaniesInvalidDataError):
    pass


class MissingFieldsMixin:
    """Carries the names of the absent fields and the offending record."""

    missing: Tuple[str, ...] = ()
    record: Optional[Dict[str, Any]] = None

    def __init__(self, message: str, missing: Sequence[str] = (), record: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.missing = tuple(missing)
        self.record = record


class UsersMissingFieldsError(MissingFieldsMixin, UsersInvalidDataError):
    pass


class CompaniesMissingFieldsError(MissingFieldsMixin, CompaniesInvalidDataError):
    pass
