"""
Store-agnostic description of a filtered, sorted, paginated list read.

A ListQuery is plain data. Backing store adapters (see query/sql.py)
translate it into their own query language.
"""
import enum
import uuid
from dataclasses import dataclass
from typing import Any

OWNER = "owner"

VIDEO_LIST_FIELDS = ("id", "thumbnail", "title", "views", "duration", "createdAt", OWNER)
COMMENT_LIST_FIELDS = ("id", "content", "createdAt", OWNER)


class SortField(str, enum.Enum):
    CREATED_AT = "createdAt"
    VIEWS = "views"


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


class PredicateOp(str, enum.Enum):
    EQ = "eq"
    ICONTAINS = "icontains"


@dataclass(frozen=True)
class Predicate:
    field: str
    op: PredicateOp
    value: Any


@dataclass(frozen=True)
class SortSpec:
    field: str
    order: SortOrder = SortOrder.DESC


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class ListQuery:
    predicates: tuple[Predicate, ...]
    sort: SortSpec
    window: PageWindow
    projection: tuple[str, ...]


def build_video_list_query(
        search: str | None,
        owner_id: uuid.UUID | None,
        sort_field: SortField,
        sort_order: SortOrder,
        window: PageWindow
) -> ListQuery:
    predicates = []
    if search and search.strip():
        predicates.append(Predicate("title", PredicateOp.ICONTAINS, search.strip()))
    if owner_id is not None:
        predicates.append(Predicate("ownerId", PredicateOp.EQ, owner_id))

    return ListQuery(
        predicates=tuple(predicates),
        sort=SortSpec(sort_field.value, sort_order),
        window=window,
        projection=VIDEO_LIST_FIELDS,
    )


def build_comment_list_query(video_id: uuid.UUID, window: PageWindow) -> ListQuery:
    # comments are always newest first
    return ListQuery(
        predicates=(Predicate("videoId", PredicateOp.EQ, video_id),),
        sort=SortSpec(SortField.CREATED_AT.value, SortOrder.DESC),
        window=window,
        projection=COMMENT_LIST_FIELDS,
    )
