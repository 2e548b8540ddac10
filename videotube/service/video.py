import logging
import uuid
from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select, update, func, exists, literal
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from videotube.model.subscription import SubscriptionModel
from videotube.model.user import UserModel
from videotube.model.video import VideoModel
from videotube.model.watch_history import WatchHistoryModel
from videotube.query.listing import build_video_list_query
from videotube.query.pagination import build_pagination
from videotube.query.params import (
    parse_page_window,
    optional_identifier,
    require_identifier,
    resolve_sort_field,
    resolve_sort_order,
)
from videotube.query.sql import VIDEO_SOURCE, run_listing
from videotube.utility.errors import InvalidArgument, NotFound, UpstreamFailure, InternalFailure
from videotube.utility.staging import has_file, stage_uploads
from videotube.utility.storage import MediaKind, MediaUploader

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


async def list_videos(
        db: AsyncSession,
        search: str | None = None,
        sort_by: str | None = None,
        sort_type: str | None = None,
        user_id: str | None = None,
        page: str | None = None,
        limit: str | None = None
) -> dict:
    owner_id = optional_identifier(user_id, "user id")

    window = parse_page_window(page, limit)
    query = build_video_list_query(
        search=search,
        owner_id=owner_id,
        sort_field=resolve_sort_field(sort_by),
        sort_order=resolve_sort_order(sort_type),
        window=window,
    )

    videos, total = await run_listing(db, VIDEO_SOURCE, query)

    return {
        "videos": videos,
        "pagination": build_pagination(total, window.page, window.limit).model_dump(),
    }


async def add_to_watch_history(db: AsyncSession, user_id: uuid.UUID, video_id: uuid.UUID) -> bool:
    """Set-add a video to the user's watch history. Returns True if it was not there yet."""
    insert = _UPSERT_INSERTS.get(db.get_bind().dialect.name)

    if insert is None:
        result = await db.execute(
            select(WatchHistoryModel.user_id).where(
                WatchHistoryModel.user_id == user_id,
                WatchHistoryModel.video_id == video_id
            )
        )
        if result.first() is not None:
            return False
        db.add(WatchHistoryModel(user_id=user_id, video_id=video_id))
        await db.flush()
        return True

    result = await db.execute(
        insert(WatchHistoryModel)
        .values(user_id=user_id, video_id=video_id)
        .on_conflict_do_nothing(index_elements=["user_id", "video_id"])
    )
    return result.rowcount == 1


async def record_view(db: AsyncSession, video_id: uuid.UUID, viewer_id: uuid.UUID | None) -> bool:
    """
    Count a view of the video.

    Anonymous views always count. An authenticated viewer counts once,
    the first time the video enters their watch history.

    Returns:
        bool: True if the view counter was incremented
    """
    if viewer_id is not None and not await add_to_watch_history(db, viewer_id, video_id):
        return False

    await db.execute(
        update(VideoModel)
        .where(VideoModel.id == video_id)
        .values(views=VideoModel.views + 1, updated_at=VideoModel.updated_at)
    )
    await db.commit()

    logger.debug("View recorded for video %s (viewer %s)", video_id, viewer_id or "anonymous")
    return True


async def get_video(db: AsyncSession, video_id: str | None, viewer: UserModel | None = None) -> dict:
    parsed_id = require_identifier(video_id, "video id")

    result = await db.execute(select(VideoModel.id).where(VideoModel.id == parsed_id))
    if result.scalar_one_or_none() is None:
        raise NotFound("Video not found")

    await record_view(db, parsed_id, viewer.id if viewer else None)

    subscribers_count = (
        select(func.count(SubscriptionModel.id))
        .where(SubscriptionModel.channel_id == VideoModel.owner_id)
        .scalar_subquery()
    )
    if viewer is not None:
        is_subscribed = exists().where(
            SubscriptionModel.channel_id == VideoModel.owner_id,
            SubscriptionModel.subscriber_id == viewer.id
        )
    else:
        is_subscribed = literal(False)

    result = await db.execute(
        select(
            VideoModel,
            UserModel.id,
            UserModel.username,
            UserModel.avatar,
            subscribers_count.label("subscribers_count"),
            is_subscribed.label("is_subscribed"),
        )
        .outerjoin(UserModel, UserModel.id == VideoModel.owner_id)
        .where(VideoModel.id == parsed_id)
    )
    row = result.one_or_none()
    if row is None:
        raise NotFound("Video not found")

    video, owner_id, username, avatar, subscriber_total, subscribed = row

    owner = None
    if owner_id is not None:
        owner = {
            "id": owner_id,
            "username": username,
            "avatar": avatar,
            "subscribersCount": subscriber_total or 0,
            "isSubscribed": bool(subscribed),
        }

    return {
        "id": video.id,
        "videoFile": video.video_file,
        "thumbnail": video.thumbnail,
        "title": video.title,
        "description": video.description,
        "duration": video.duration,
        "isPublished": video.is_published,
        "createdAt": video.created_at,
        "owner": owner,
    }


def serialize_video(video: VideoModel) -> dict:
    return {
        "id": video.id,
        "videoFile": video.video_file,
        "videoPublicId": video.video_public_id,
        "thumbnail": video.thumbnail,
        "thumbnailPublicId": video.thumbnail_public_id,
        "title": video.title,
        "description": video.description,
        "duration": video.duration,
        "views": video.views,
        "isPublished": video.is_published,
        "owner": video.owner_id,
        "createdAt": video.created_at,
        "updatedAt": video.updated_at,
    }


async def publish_video(
        db: AsyncSession,
        uploader: MediaUploader,
        owner: UserModel,
        title: str | None,
        description: str | None,
        video_file: UploadFile | None,
        thumbnail: UploadFile | None
) -> dict:
    if not title or not title.strip() or not description or not description.strip():
        raise InvalidArgument("title and description are required")

    if not has_file(video_file) or not has_file(thumbnail):
        raise InvalidArgument("video and thumbnail is required")

    async with stage_uploads(video_file, thumbnail) as (video_path, thumbnail_path):
        uploaded_video = await run_in_threadpool(uploader.upload, video_path, MediaKind.VIDEO)
        uploaded_thumbnail = None
        if uploaded_video:
            uploaded_thumbnail = await run_in_threadpool(uploader.upload, thumbnail_path, MediaKind.IMAGE)

    if not uploaded_video or not uploaded_thumbnail:
        logger.warning("Media upload failed for video %r by user %s", title, owner.id)
        raise UpstreamFailure("failed to upload media to the storage provider")

    video = VideoModel(
        owner_id=owner.id,
        title=title.strip(),
        description=description.strip(),
        video_file=uploaded_video.url,
        video_public_id=uploaded_video.public_id,
        thumbnail=uploaded_thumbnail.url,
        thumbnail_public_id=uploaded_thumbnail.public_id,
        duration=uploaded_video.duration,
        is_published=True,
    )

    try:
        db.add(video)
        await db.commit()
        await db.refresh(video)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Failed to save video %r", title)
        raise InternalFailure("something went wrong while saving the video") from e

    logger.info("Video %s published by user %s", video.id, owner.id)
    return serialize_video(video)
