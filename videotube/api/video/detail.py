from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from videotube.api.auth.viewer import get_optional_user
from videotube.api.router_base import router_video as router
from videotube.db.dependency import get_db
from videotube.model.user import UserModel
from videotube.service.video import get_video
from videotube.utility.response import api_response


@router.get("/{video_id}")
async def get_video_by_id(
        video_id: str,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_video(db, video_id, viewer)
    return api_response(video, "video fetched successfully")
