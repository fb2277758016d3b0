"""
Twitch URL matching and URL resolution utilities.
"""

import re
from urllib.parse import urljoin, urlparse

TWITCH_URL_PATTERN = re.compile(r'^(https?://)?(www\.)?twitch\.tv/(\w+)', re.IGNORECASE)
USHER_PATH_PATTERN = re.compile(r'/api/channel/hls/(\w+)\.m3u8$', re.IGNORECASE)


def match_link(url: str) -> bool:
    """
    Check if URL points to a Twitch channel.
    """
    return TWITCH_URL_PATTERN.match(url) is not None


def extract_channel(url: str) -> str:
    """
    Extract channel name from a Twitch channel URL.
    Pattern: https://www.twitch.tv/<channel>
    """
    match = TWITCH_URL_PATTERN.match(url)
    if match:
        return match.group(3)
    return None


def extract_channel_from_manifest_url(url: str) -> str:
    """
    Extract channel name from an usher manifest URL.
    Pattern: /api/channel/hls/<channel>.m3u8
    """
    match = USHER_PATH_PATTERN.search(urlparse(url).path)
    if match:
        return match.group(1)
    return None


def restore_link(channel: str) -> str:
    return 'http://www.twitch.tv/' + channel


def get_base_url(url: str) -> str:
    """
    Extract base URL from full URL.
    Return base URL for relative path resolution.
    """
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}{parsed.path.rsplit('/', 1)[0]}/"


def build_absolute_url(base_url: str, relative_url: str) -> str:
    """
    Convert relative URLs to absolute.
    Handle base URL resolution.
    """
    return urljoin(base_url, relative_url)
