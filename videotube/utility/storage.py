"""
Media upload provider backed by Supabase Storage
"""
import enum
import logging
import mimetypes
import os
import uuid
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from supabase import create_client, Client

from videotube.config.environments import (
    SUPABASE_PROJECT_URL,
    SUPABASE_SERVICE_KEY,
    VIDEO_BUCKET,
    THUMBNAIL_BUCKET,
)
from videotube.utility.video import get_video_duration

logger = logging.getLogger(__name__)


class MediaKind(str, enum.Enum):
    VIDEO = "video"
    IMAGE = "image"


@dataclass(frozen=True)
class UploadResult:
    url: str
    public_id: str
    duration: float | None = None


class MediaUploader(Protocol):
    def upload(self, local_path: str, kind: MediaKind) -> UploadResult | None:
        ...


class SupabaseMediaUploader:
    """
    Upload staged local files to Supabase Storage

    Videos go to the video bucket, images to the thumbnail bucket.
    The object path inside the bucket is reported as the public id.
    """

    def __init__(
            self,
            project_url: str,
            service_key: str,
            video_bucket: str = "videos",
            image_bucket: str = "thumbnails"
    ):
        self.client: Client = create_client(project_url, service_key)
        self.buckets = {
            MediaKind.VIDEO: video_bucket,
            MediaKind.IMAGE: image_bucket,
        }

    def upload(self, local_path: str, kind: MediaKind) -> UploadResult | None:
        """
        Upload a file from local disk

        Args:
            local_path: Path of the staged file
            kind: Media kind, selects the bucket

        Returns:
            UploadResult | None: URL, object path and (for videos) duration,
            or None if the upload failed
        """
        if not local_path or not os.path.exists(local_path):
            logger.warning("Nothing to upload at %s", local_path)
            return None

        bucket = self.buckets[kind]
        object_name = f"{uuid.uuid4()}{Path(local_path).suffix}"
        content_type = mimetypes.guess_type(local_path)[0] or "application/octet-stream"

        try:
            with open(local_path, "rb") as f:
                self.client.storage.from_(bucket).upload(
                    path=object_name,
                    file=f.read(),
                    file_options={
                        "content-type": content_type,
                        "upsert": "false"  # Don't overwrite existing files
                    }
                )

            public_url = self.client.storage.from_(bucket).get_public_url(object_name)

        except Exception:
            logger.exception("Failed to upload %s to Supabase Storage bucket %s", local_path, bucket)
            return None

        duration = get_video_duration(local_path) if kind == MediaKind.VIDEO else None

        return UploadResult(url=public_url, public_id=object_name, duration=duration)


@lru_cache
def get_media_uploader() -> MediaUploader:
    return SupabaseMediaUploader(
        SUPABASE_PROJECT_URL,
        SUPABASE_SERVICE_KEY,
        video_bucket=VIDEO_BUCKET,
        image_bucket=THUMBNAIL_BUCKET
    )
