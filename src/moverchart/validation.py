"""Input validation for chart requests.

Every problem in a document is collected before anything is reported, so a
user fixing an input file sees the whole list at once.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from moverchart.errors import InputError
from moverchart.logging import logger
from moverchart.models import ChartRequest, Record

RECORD_FIELDS = ("ticker", "name", "logo", "driver", "change_pct")


class Valid(BaseModel):
    model_config = ConfigDict(frozen=True)

    request: ChartRequest

    @property
    def ok(self) -> bool:
        return True


class Invalid(BaseModel):
    model_config = ConfigDict(frozen=True)

    errors: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Valid | Invalid


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _check_item(index: int, item: Any) -> list[str]:
    """Return the problems with one record; `index` is 1-based."""
    if not isinstance(item, dict):
        return [f"Item {index} must be an object"]

    errors = []
    for field in RECORD_FIELDS:
        if field == "logo":
            # An empty or null logo is allowed and renders the fallback badge
            logo = item.get(field)
            if field not in item or not (logo is None or isinstance(logo, str)):
                errors.append(f"Item {index} is missing {field} field")
        elif not _is_filled(item.get(field)):
            errors.append(f"Item {index} is missing {field} field")
    return errors


def _build_record(item: dict) -> Record:
    logo = item.get("logo")
    return Record(
        ticker=item["ticker"],
        name=item["name"],
        logo_ref=logo.strip() if logo and logo.strip() else None,
        driver=item["driver"],
        change_pct=item["change_pct"],
    )


def validate(raw: Any) -> ValidationResult:
    """
    Check a decoded JSON value and build a ChartRequest from it.

    Args:
        raw: Any decoded JSON value

    Returns:
        Valid carrying the request, or Invalid carrying every error message
        in check order (titles, data list, then each item in turn).
    """
    if not isinstance(raw, dict):
        return Invalid(errors=("Input must be a JSON object",))

    errors: list[str] = []
    if not _is_filled(raw.get("title_main")):
        errors.append("Missing title_main field")
    if not _is_filled(raw.get("title_sub")):
        errors.append("Missing title_sub field")

    items = raw.get("data")
    if not isinstance(items, list):
        errors.append("data field must be a list")
    elif not items:
        errors.append("Data list must not be empty")
    else:
        for index, item in enumerate(items, start=1):
            errors.extend(_check_item(index, item))

    if errors:
        logger.debug("Input rejected errors={count}", count=len(errors))
        return Invalid(errors=tuple(errors))

    request = ChartRequest(
        title_main=raw["title_main"],
        title_sub=raw["title_sub"],
        records=tuple(_build_record(item) for item in items),
    )
    logger.debug("Input accepted records={count}", count=len(request.records))
    return Valid(request=request)


def validate_or_raise(raw: Any) -> ChartRequest:
    """Like validate(), but raise InputError instead of returning Invalid."""
    result = validate(raw)
    if isinstance(result, Invalid):
        raise InputError(result.errors)
    return result.request


def load_request(path: Path) -> ChartRequest:
    """Read a JSON file and validate it into a ChartRequest."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputError([f"Invalid JSON: {e}"]) from e
    return validate_or_raise(raw)
