import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SUPABASE_PROJECT_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")

import uuid
from datetime import datetime, timedelta, UTC

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from videotube.application import application
from videotube.db.database import Base
from videotube.db.dependency import get_db
from videotube.model.comment import CommentModel
from videotube.model.session import SessionModel
from videotube.model.subscription import SubscriptionModel
from videotube.model.user import UserModel
from videotube.model.video import VideoModel
from videotube.model.watch_history import WatchHistoryModel
from videotube.utility.storage import MediaKind, UploadResult, get_media_uploader
from videotube.utility.time import utc_now

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


class FakeUploader:
    """Stands in for the storage provider; remembers what it was asked to upload"""

    def __init__(self):
        self.failing_kinds = set()
        self.calls = []

    def upload(self, local_path, kind):
        self.calls.append({
            "path": local_path,
            "kind": kind,
            "existed": os.path.exists(local_path),
        })
        if kind in self.failing_kinds:
            return None
        name = os.path.basename(local_path)
        return UploadResult(
            url=f"https://cdn.test/{kind.value}/{name}",
            public_id=name,
            duration=12.5 if kind == MediaKind.VIDEO else None,
        )


class Seeder:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def _save(self, obj):
        async with self.session_factory() as session:
            session.add(obj)
            await session.commit()
        return obj

    async def user(self, username=None, avatar=None):
        username = username or f"user_{uuid.uuid4().hex[:8]}"
        return await self._save(UserModel(
            email=f"{username}@example.com",
            username=username,
            avatar=avatar or f"https://cdn.test/avatars/{username}.png",
        ))

    async def login(self, user, expires_in=3600):
        token = uuid.uuid4().hex
        await self._save(SessionModel(
            user_id=user.id,
            session_token=token,
            expires_at=utc_now() + timedelta(seconds=expires_in),
        ))
        return token

    async def auth_headers(self, user, expires_in=3600):
        token = await self.login(user, expires_in)
        return {"Authorization": f"Bearer {token}"}

    async def video(self, owner=None, title="Video", views=0, minute=0):
        return await self._save(VideoModel(
            owner_id=owner.id if owner else None,
            title=title,
            description=f"About {title}",
            video_file=f"https://cdn.test/video/{uuid.uuid4().hex}.mp4",
            video_public_id=uuid.uuid4().hex,
            thumbnail=f"https://cdn.test/image/{uuid.uuid4().hex}.jpg",
            thumbnail_public_id=uuid.uuid4().hex,
            duration=60.0,
            views=views,
            created_at=BASE_TIME + timedelta(minutes=minute),
        ))

    async def comment(self, video, owner=None, content="Nice", minute=0):
        return await self._save(CommentModel(
            video_id=video.id,
            owner_id=owner.id if owner else None,
            content=content,
            created_at=BASE_TIME + timedelta(minutes=minute),
        ))

    async def subscribe(self, subscriber, channel):
        return await self._save(SubscriptionModel(subscriber_id=subscriber.id, channel_id=channel.id))

    async def views_of(self, video):
        async with self.session_factory() as session:
            result = await session.execute(select(VideoModel.views).where(VideoModel.id == video.id))
            return result.scalar_one()

    async def has_watched(self, user, video):
        async with self.session_factory() as session:
            result = await session.execute(
                select(WatchHistoryModel).where(
                    WatchHistoryModel.user_id == user.id,
                    WatchHistoryModel.video_id == video.id
                )
            )
            return result.scalar_one_or_none() is not None

    async def video_count(self):
        async with self.session_factory() as session:
            result = await session.execute(select(VideoModel))
            return len(result.scalars().all())


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'videotube.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed(session_factory):
    return Seeder(session_factory)


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
async def client(session_factory, uploader):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_media_uploader] = lambda: uploader

    async with AsyncClient(transport=ASGITransport(app=application), base_url="http://test") as client:
        yield client

    application.dependency_overrides.clear()


class ExplodingSession:
    """Fails the test if anything tries to reach the store"""

    async def execute(self, *args, **kwargs):
        raise AssertionError("the store must not be queried")


@pytest.fixture
def exploding_session():
    return ExplodingSession()
