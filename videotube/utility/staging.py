import os
import shutil
import tempfile
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import UploadFile

CHUNK_SIZE = 1024 * 1024


def has_file(file: UploadFile | None) -> bool:
    return bool(getattr(file, "filename", None))


@asynccontextmanager
async def stage_uploads(*files: UploadFile):
    """
    Write multipart uploads to a temporary directory

    Yields the local paths in the order the files were given. The directory
    is removed when the block exits, whether or not it raised.
    """
    temp_dir = tempfile.mkdtemp(prefix="videotube-")
    try:
        paths = []
        for file in files:
            local_path = os.path.join(temp_dir, f"{uuid.uuid4()}{Path(file.filename).suffix}")
            with open(local_path, "wb") as buffer:
                while chunk := await file.read(CHUNK_SIZE):
                    buffer.write(chunk)
            paths.append(local_path)
        yield paths

    finally:
        if os.path.exists(temp_dir):
            shutil.rmtree(temp_dir)
