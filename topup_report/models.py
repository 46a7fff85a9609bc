"""Core data models shared by loading, joining, and report rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .users import UserCollection


@dataclass(frozen=True)
class User:
    id: int
    first_name: str
    last_name: str
    email: str
    company_id: int
    email_status: bool
    active_status: bool
    tokens: int


@dataclass(frozen=True)
class JoinedUser:
    """A user seen through a company join, with its topped-up balance."""

    user: User
    tokens_after_top_up: int

    @classmethod
    def top_up(cls, user: User, amount: int) -> "JoinedUser":
        return cls(user=user, tokens_after_top_up=user.tokens + amount)

    @property
    def id(self) -> int:
        return self.user.id

    @property
    def first_name(self) -> str:
        return self.user.first_name

    @property
    def last_name(self) -> str:
        return self.user.last_name

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def company_id(self) -> int:
        return self.user.company_id

    @property
    def email_status(self) -> bool:
        return self.user.email_status

    @property
    def active_status(self) -> bool:
        return self.user.active_status

    @property
    def tokens(self) -> int:
        return self.user.tokens


@dataclass
class Company:
    id: int
    name: str
    top_up: int
    email_status: bool
    users: "UserCollection"

    def users_emailed(self) -> List[JoinedUser]:
        """Owned users, by last name, who get an email (both flags set)."""
        return [u for u in self.users.all() if u.email_status and self.email_status]

    def users_not_emailed(self) -> List[JoinedUser]:
        """Owned users, by last name, where either email flag is off."""
        return [u for u in self.users.all() if not u.email_status or not self.email_status]

    def total_top_up(self) -> int:
        return self.top_up * self.users.count()
