"""Pytest configuration and fixtures for top-up report tests."""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable, Generator, List

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def write_json(temp_dir: Path) -> Callable[[str, Any], Path]:
    """Return a helper that dumps a payload to ``temp_dir / name``."""

    def _write(name: str, payload: Any) -> Path:
        path = temp_dir / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


def make_user(**overrides) -> dict:
    record = {
        "id": 1,
        "first_name": "Tanya",
        "last_name": "Nichols",
        "email": "tanya.nichols@test.com",
        "company_id": 2,
        "email_status": True,
        "active_status": True,
        "tokens": 23,
    }
    record.update(overrides)
    return record


def make_company(**overrides) -> dict:
    record = {"id": 2, "name": "Co2", "top_up": 10, "email_status": True}
    record.update(overrides)
    return record


@pytest.fixture
def sample_users() -> List[dict]:
    return [
        make_user(id=1, first_name="Tanya", last_name="Nichols", email="tanya.nichols@test.com",
                  company_id=2, email_status=True, active_status=True, tokens=23),
        make_user(id=2, first_name="Bradley", last_name="Simpson", email="bradley.simpson@test.com",
                  company_id=1, email_status=False, active_status=True, tokens=40),
        make_user(id=3, first_name="Amy", last_name="Gomez", email="amy.gomez@test.com",
                  company_id=1, email_status=True, active_status=True, tokens=5),
        make_user(id=4, first_name="Jerry", last_name="Nichols", email="jerry.nichols@test.com",
                  company_id=2, email_status=False, active_status=True, tokens=0),
        make_user(id=5, first_name="Ghost", last_name="Adams", email="ghost.adams@test.com",
                  company_id=1, email_status=True, active_status=False, tokens=99),
        make_user(id=6, first_name="Idle", last_name="Brown", email="idle.brown@test.com",
                  company_id=3, email_status=True, active_status=False, tokens=12),
    ]


@pytest.fixture
def sample_companies() -> List[dict]:
    return [
        make_company(id=2, name="Co2", top_up=10, email_status=True),
        make_company(id=3, name="Co3", top_up=7, email_status=True),
        make_company(id=1, name="Co1", top_up=5, email_status=False),
    ]


@pytest.fixture
def sample_files(write_json, sample_users, sample_companies):
    """Write the sample dataset and return ``(users_path, companies_path)``."""
    return (
        write_json("users.json", sample_users),
        write_json("companies.json", sample_companies),
    )
