"""
YouTube link helpers and time formatting.
"""

import re
from typing import Optional

YOUTUBE_URL_RE = re.compile(r"^(https?://)?(www\.)?(youtube\.com|youtu\.be)/[\w\-]+")

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=)([^&]+)"),
    re.compile(r"(?:youtube\.com/embed/)([^?]+)"),
    re.compile(r"(?:youtu\.be/)([^?]+)"),
    re.compile(r"(?:youtube\.com/v/)([^?]+)"),
]


def is_valid_youtube_url(url: str) -> bool:
    """Check that a link points at youtube.com or youtu.be."""
    return bool(url) and YOUTUBE_URL_RE.match(url.strip()) is not None


def extract_video_id(url: str) -> Optional[str]:
    """Pull the video id out of watch, embed, short and /v/ links."""
    if not url:
        return None
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    return None


def format_time(seconds: float) -> str:
    """Format seconds as MM:SS (minutes are not wrapped into hours)"""
    seconds = max(0.0, float(seconds))
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"
