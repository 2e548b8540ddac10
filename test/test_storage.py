import pytest

from videotube.utility import storage
from videotube.utility.storage import MediaKind, SupabaseMediaUploader


class FakeBucket:
    def __init__(self, client, name):
        self.client = client
        self.name = name

    def upload(self, path, file, file_options):
        if self.client.broken:
            raise RuntimeError("storage unavailable")
        self.client.uploads.append((self.name, path, file, file_options))

    def get_public_url(self, path):
        return f"https://project.supabase.co/storage/v1/object/public/{self.name}/{path}"


class FakeStorage:
    def __init__(self, client):
        self.client = client

    def from_(self, bucket):
        return FakeBucket(self.client, bucket)


class FakeClient:
    def __init__(self):
        self.broken = False
        self.uploads = []
        self.storage = FakeStorage(self)


@pytest.fixture
def fake_client(monkeypatch):
    client = FakeClient()
    monkeypatch.setattr(storage, "create_client", lambda url, key: client)
    monkeypatch.setattr(storage, "get_video_duration", lambda path: 42.0)
    return client


@pytest.fixture
def staged_video(tmp_path):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"video-bytes")
    return str(path)


def test_video_upload_goes_to_video_bucket(fake_client, staged_video):
    uploader = SupabaseMediaUploader("https://project.supabase.co", "key", video_bucket="media")

    result = uploader.upload(staged_video, MediaKind.VIDEO)

    [(bucket, object_name, content, options)] = fake_client.uploads
    assert bucket == "media"
    assert object_name.endswith(".mp4")
    assert content == b"video-bytes"
    assert options["content-type"] == "video/mp4"
    assert result.public_id == object_name
    assert result.url.endswith(f"/media/{object_name}")
    assert result.duration == 42.0


def test_image_upload_has_no_duration(fake_client, tmp_path):
    path = tmp_path / "thumb.png"
    path.write_bytes(b"png")
    uploader = SupabaseMediaUploader("https://project.supabase.co", "key")

    result = uploader.upload(str(path), MediaKind.IMAGE)

    assert fake_client.uploads[0][0] == "thumbnails"
    assert result.duration is None


def test_provider_error_yields_no_result(fake_client, staged_video):
    fake_client.broken = True
    uploader = SupabaseMediaUploader("https://project.supabase.co", "key")

    assert uploader.upload(staged_video, MediaKind.VIDEO) is None


def test_missing_local_file_yields_no_result(fake_client, tmp_path):
    uploader = SupabaseMediaUploader("https://project.supabase.co", "key")

    assert uploader.upload(str(tmp_path / "gone.mp4"), MediaKind.VIDEO) is None
    assert fake_client.uploads == []
