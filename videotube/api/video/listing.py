from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from videotube.api.auth.viewer import get_current_user
from videotube.api.router_base import router_video as router
from videotube.db.dependency import get_db
from videotube.model.user import UserModel
from videotube.service.video import list_videos
from videotube.utility.response import api_response


@router.get(
    "",
    summary="List videos",
    description="Search, sort and paginate videos, optionally restricted to one owner"
)
async def get_all_videos(
        search: str | None = Query(default=None),
        sort_by: str | None = Query(default=None, alias="sortBy"),
        sort_type: str | None = Query(default=None, alias="sortType"),
        user_id: str | None = Query(default=None, alias="userId"),
        page: str | None = Query(default=None),
        limit: str | None = Query(default=None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    data = await list_videos(
        db,
        search=search,
        sort_by=sort_by,
        sort_type=sort_type,
        user_id=user_id,
        page=page,
        limit=limit,
    )
    return api_response(data, "videos fetched successfully")
