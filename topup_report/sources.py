"""Reading a JSON array of flat records from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Type, Union

from .errors import ReportError

logger = logging.getLogger(__name__)


def read_records(
    source: Union[str, Path],
    not_found_error: Type[ReportError],
    invalid_json_error: Type[ReportError],
) -> List[Dict[str, Any]]:
    """Load ``source`` and return its top-level list of JSON objects.

    Raises ``not_found_error`` when the file cannot be opened and
    ``invalid_json_error`` when it is not a JSON array of objects.
    """
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise not_found_error(
            f"File {path.name} not found in {_where(path)}. "
            "Please make sure the file exists and try again."
        ) from exc
    except OSError as exc:
        raise not_found_error(f"File {path} could not be read: {exc.strerror or exc}") from exc
    except (ValueError, RecursionError) as exc:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized int literals.
        raise invalid_json_error(_invalid_message(path)) from exc

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise invalid_json_error(_invalid_message(path))

    logger.debug("Read %d record(s) from %s", len(data), path)
    return data


def _where(path: Path) -> str:
    if path.parent == Path("."):
        return "current directory"
    return str(path.parent)


def _invalid_message(path: Path) -> str:
    return (
        f"Invalid JSON data for {path.name} file. "
        "Please make sure the file is valid and try again."
    )
