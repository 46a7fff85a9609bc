"""Plain-text rendering of the top-up report.

Rendering is done once into a list of lines; :func:`write_report` then
hands the same text to every sink, so the console and the output file
always match byte for byte.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol

from .models import Company, JoinedUser


class Sink(Protocol):
    def write(self, text: str) -> object: ...


def user_lines(user: JoinedUser) -> List[str]:
    return [
        f"\t\t{user.last_name}, {user.first_name}, {user.email}",
        f"\t\t  Previous token balance, {user.tokens}",
        f"\t\t  New token balance {user.tokens_after_top_up}",
    ]


def company_lines(company: Company) -> List[str]:
    lines = [
        f"\tCompanyId: {company.id}",
        f"\tCompany: {company.name}",
        "\tUsers Emailed:",
    ]
    for user in company.users_emailed():
        lines.extend(user_lines(user))

    lines.append("\tUsers Not Emailed:")
    for user in company.users_not_emailed():
        lines.extend(user_lines(user))

    lines.append(f"\t\tTotal amount of top ups for {company.name}: {company.total_top_up()}")
    return lines


def render_lines(companies: Iterable[Company]) -> List[str]:
    lines = [""]
    for company in companies:
        lines.extend(company_lines(company))
    lines.append("")
    return lines


def render(companies: Iterable[Company]) -> str:
    return "\n".join(render_lines(companies)) + "\n"


def write_report(companies: Iterable[Company], *sinks: Sink) -> str:
    """Render ``companies`` once and write the text to each sink in order."""
    text = render(companies)
    for sink in sinks:
        sink.write(text)
    return text
