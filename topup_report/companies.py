"""Company collection joined against a resolved :class:`UserCollection`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Union

from . import config
from .errors import CompaniesFileNotFoundError, CompaniesInvalidJSONError
from .models import Company
from .sources import read_records
from .users import UserCollection
from .validation import parse_company_fields

logger = logging.getLogger(__name__)


class CompanyCollection:
    """Companies that own at least one active user."""

    def __init__(self, users: UserCollection, companies: Optional[Iterable[Company]] = None) -> None:
        self._users = users
        self._companies: List[Company] = [c for c in (companies or []) if c.users.count() > 0]

    @classmethod
    def load(cls, source: Union[str, Path, None], users: UserCollection) -> "CompanyCollection":
        collection = cls(users)
        collection.read_file(source)
        return collection

    def read_file(self, source: Union[str, Path, None] = None) -> None:
        path = Path(source) if source is not None else config.COMPANIES_FILE
        records = read_records(path, CompaniesFileNotFoundError, CompaniesInvalidJSONError)

        companies: List[Company] = []
        for record in records:
            fields = parse_company_fields(record)
            joined = self._users.find_by_company(fields["id"], fields["top_up"])
            if joined.count() > 0:
                companies.append(Company(users=joined, **fields))
            else:
                logger.debug("Dropping company %s: no active users", fields["id"])

        logger.info(
            "Loaded %d compan%s with active users from %s (%d record(s) read)",
            len(companies),
            "y" if len(companies) == 1 else "ies",
            path,
            len(records),
        )
        self._companies = companies

    def all(self) -> List[Company]:
        return sorted(self._companies, key=lambda company: company.id)

    def for_each(self, fn: Callable[[Company], object]) -> None:
        for company in self.all():
            fn(company)

    def count(self) -> int:
        return len(self._companies)

    def __len__(self) -> int:
        return len(self._companies)

    def __iter__(self) -> Iterator[Company]:
        return iter(self.all())
