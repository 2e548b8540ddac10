"""
SQLAlchemy adapter for ListQuery
"""
from dataclasses import dataclass
from typing import Any, Mapping

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.model.comment import CommentModel
from videotube.model.user import UserModel
from videotube.model.video import VideoModel
from videotube.query.listing import ListQuery, Predicate, PredicateOp, SortOrder, OWNER


@dataclass(frozen=True)
class ListingSource:
    """Maps logical field names of one collection onto ORM columns"""
    model: type
    owner_column: Any
    fields: Mapping[str, Any]


VIDEO_SOURCE = ListingSource(
    model=VideoModel,
    owner_column=VideoModel.owner_id,
    fields={
        "id": VideoModel.id,
        "title": VideoModel.title,
        "thumbnail": VideoModel.thumbnail,
        "views": VideoModel.views,
        "duration": VideoModel.duration,
        "createdAt": VideoModel.created_at,
        "ownerId": VideoModel.owner_id,
    },
)

COMMENT_SOURCE = ListingSource(
    model=CommentModel,
    owner_column=CommentModel.owner_id,
    fields={
        "id": CommentModel.id,
        "content": CommentModel.content,
        "createdAt": CommentModel.created_at,
        "videoId": CommentModel.video_id,
    },
)


def _condition(source: ListingSource, predicate: Predicate):
    column = source.fields[predicate.field]
    if predicate.op == PredicateOp.EQ:
        return column == predicate.value
    if predicate.op == PredicateOp.ICONTAINS:
        return column.icontains(predicate.value, autoescape=True)
    raise ValueError(f"Unsupported predicate operator: {predicate.op}")


def _owner_profile(mapping) -> dict | None:
    if mapping["owner_id"] is None:
        return None
    return {
        "id": mapping["owner_id"],
        "username": mapping["owner_username"],
        "avatar": mapping["owner_avatar"],
    }


async def run_listing(db: AsyncSession, source: ListingSource, query: ListQuery) -> tuple[list[dict], int]:
    """
    Execute a ListQuery

    Returns:
        tuple[list[dict], int]: projected rows of the requested page and the
        total number of rows matching the predicates
    """
    conditions = [_condition(source, predicate) for predicate in query.predicates]

    count_result = await db.execute(
        select(func.count()).select_from(source.model).where(*conditions)
    )
    total = count_result.scalar_one()

    columns = [source.fields[name].label(name) for name in query.projection if name != OWNER]
    with_owner = OWNER in query.projection

    statement = select(*columns)
    if with_owner:
        statement = statement.add_columns(
            UserModel.id.label("owner_id"),
            UserModel.username.label("owner_username"),
            UserModel.avatar.label("owner_avatar"),
        ).outerjoin(UserModel, UserModel.id == source.owner_column)

    sort_column = source.fields[query.sort.field]
    tie_breaker = source.fields["id"]
    if query.sort.order == SortOrder.ASC:
        statement = statement.order_by(sort_column.asc(), tie_breaker.asc())
    else:
        statement = statement.order_by(sort_column.desc(), tie_breaker.desc())

    statement = (
        statement
        .where(*conditions)
        .offset(query.window.skip)
        .limit(query.window.limit)
    )

    result = await db.execute(statement)

    items = []
    for row in result.mappings():
        item = {name: row[name] for name in query.projection if name != OWNER}
        if with_owner:
            item[OWNER] = _owner_profile(row)
        items.append(item)

    return items, total
