from fastapi import UploadFile, File, Form, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from videotube.api.auth.viewer import get_current_user
from videotube.api.router_base import router_video as router
from videotube.db.dependency import get_db
from videotube.model.user import UserModel
from videotube.service.video import publish_video
from videotube.utility.response import api_response
from videotube.utility.storage import MediaUploader, get_media_uploader


@router.post("", status_code=status.HTTP_201_CREATED)
async def publish_a_video(
        title: str | None = Form(default=None),
        description: str | None = Form(default=None),
        video_file: UploadFile | None = File(default=None, alias="videoFile"),
        thumbnail: UploadFile | None = File(default=None),
        user: UserModel = Depends(get_current_user),
        uploader: MediaUploader = Depends(get_media_uploader),
        db: AsyncSession = Depends(get_db)
):
    video = await publish_video(
        db,
        uploader,
        owner=user,
        title=title,
        description=description,
        video_file=video_file,
        thumbnail=thumbnail,
    )
    return api_response(video, "video uploaded successfully", status.HTTP_201_CREATED)
