from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from videotube.api.router_base import router_comment as router
from videotube.db.dependency import get_db
from videotube.service.comment import list_comments
from videotube.utility.response import api_response


@router.get("/{video_id}/comments")
async def get_video_comments(
        video_id: str,
        page: str | None = Query(default=None),
        limit: str | None = Query(default=None),
        db: AsyncSession = Depends(get_db)
):
    data = await list_comments(db, video_id, page=page, limit=limit)
    return api_response(data, "all comments fetched successfully!")
