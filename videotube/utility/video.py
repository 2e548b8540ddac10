"""
Video probing utilities using FFmpeg
"""
import logging
import os
import shutil
import subprocess

logger = logging.getLogger(__name__)


def check_ffprobe_installed() -> bool:
    """
    Check if ffprobe is installed and available in PATH

    Returns:
        bool: True if ffprobe is installed, False otherwise
    """
    return shutil.which("ffprobe") is not None


def get_video_duration(video_path: str) -> float | None:
    """
    Get the duration of a video file in seconds

    Args:
        video_path: Path to the video file

    Returns:
        float | None: Duration in seconds, or None if it cannot be measured
    """
    if not check_ffprobe_installed():
        logger.warning("ffprobe is not installed, video duration unavailable")
        return None

    if not os.path.exists(video_path):
        logger.warning("Video file not found: %s", video_path)
        return None

    command = [
        "ffprobe",
        "-v", "error",
        "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1",
        video_path
    ]

    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True
        )
        return float(result.stdout.decode().strip())

    except (subprocess.CalledProcessError, ValueError) as e:
        logger.warning("Error getting video duration for %s: %s", video_path, e)
        return None
