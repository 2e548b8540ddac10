"""
Typed parsing of raw query parameters

Each parser reports whether the raw value was accepted as is, silently
replaced by a default, or rejected, so the repair and reject policies stay
separate and testable.
"""
import enum
import uuid
from dataclasses import dataclass
from typing import Generic, TypeVar

from videotube.config.environments import PAGE_DEFAULT, LIMIT_DEFAULT, MAX_PAGE, MAX_LIMIT
from videotube.query.listing import PageWindow, SortField, SortOrder
from videotube.utility.errors import InvalidArgument

T = TypeVar("T")


class ParamStatus(str, enum.Enum):
    VALID = "valid"
    DEFAULTED = "defaulted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ParamResult(Generic[T]):
    status: ParamStatus
    value: T | None

    @property
    def ok(self) -> bool:
        return self.status != ParamStatus.REJECTED


def parse_positive_int(raw: str | None, default: int, maximum: int | None = None) -> ParamResult[int]:
    if raw is None or not str(raw).strip():
        return ParamResult(ParamStatus.DEFAULTED, default)
    try:
        value = int(str(raw).strip())
    except ValueError:
        return ParamResult(ParamStatus.DEFAULTED, default)
    if value < 1 or (maximum is not None and value > maximum):
        return ParamResult(ParamStatus.DEFAULTED, default)
    return ParamResult(ParamStatus.VALID, value)


def parse_page_window(page: str | None, limit: str | None) -> PageWindow:
    # both bounds keep (page - 1) * limit inside a 64-bit OFFSET
    return PageWindow(
        page=parse_positive_int(page, PAGE_DEFAULT, MAX_PAGE).value,
        limit=parse_positive_int(limit, LIMIT_DEFAULT, MAX_LIMIT).value,
    )


def parse_identifier(raw: str | None) -> ParamResult[uuid.UUID]:
    # only an absent or empty value means "not supplied"; whitespace is a bad id
    if raw is None or raw == "":
        return ParamResult(ParamStatus.DEFAULTED, None)
    try:
        return ParamResult(ParamStatus.VALID, uuid.UUID(raw.strip()))
    except ValueError:
        return ParamResult(ParamStatus.REJECTED, None)


def require_identifier(raw: str | None, name: str) -> uuid.UUID:
    result = parse_identifier(raw)
    if result.status != ParamStatus.VALID:
        raise InvalidArgument(f"Invalid {name}")
    return result.value


def optional_identifier(raw: str | None, name: str) -> uuid.UUID | None:
    result = parse_identifier(raw)
    if not result.ok:
        raise InvalidArgument(f"Invalid {name}")
    return result.value


def resolve_sort_field(raw: str | None) -> SortField:
    try:
        return SortField(raw)
    except ValueError:
        return SortField.CREATED_AT


def resolve_sort_order(raw: str | None) -> SortOrder:
    # only an explicit "asc" flips the default
    if raw == "asc":
        return SortOrder.ASC
    return SortOrder.DESC
