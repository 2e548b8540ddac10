from sqlalchemy.ext.asyncio import AsyncSession

from videotube.query.listing import build_comment_list_query
from videotube.query.pagination import build_pagination
from videotube.query.params import parse_page_window, require_identifier
from videotube.query.sql import COMMENT_SOURCE, run_listing


async def list_comments(
        db: AsyncSession,
        video_id: str | None,
        page: str | None = None,
        limit: str | None = None
) -> dict:
    parsed_id = require_identifier(video_id, "video id")

    window = parse_page_window(page, limit)
    comments, total = await run_listing(db, COMMENT_SOURCE, build_comment_list_query(parsed_id, window))

    return {
        "comments": comments,
        "pagination": build_pagination(total, window.page, window.limit).model_dump(),
    }
