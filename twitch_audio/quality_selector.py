"""
Select a stream from a parsed master playlist.
"""

import logging
from typing import Optional, Sequence

from twitch_audio.errors import NoAudioOnlyVariantError
from twitch_audio.playlist_parser import StreamQuality, StreamVariant

logger = logging.getLogger(__name__)


def select_audio_only(variants: Sequence[StreamVariant]) -> int:
    """
    Find the first audio_only stream.
    Return its index in manifest order.
    Raise NoAudioOnlyVariantError if there is none.
    """
    for index, variant in enumerate(variants):
        if variant.quality is StreamQuality.AUDIO_ONLY:
            logger.debug("Selected audio_only stream %d (%d bps)", index, variant.bandwidth)
            return index

    raise NoAudioOnlyVariantError()


def get_selected_url(variants: Sequence[StreamVariant], index: Optional[int]) -> Optional[str]:
    """
    Return the URL of the stream at index, or None if index is out of range.
    """
    if index is None or index < 0 or index >= len(variants):
        logger.debug("Selected index %r out of range for %d streams", index, len(variants))
        return None

    return variants[index].url


def get_stream_info(variants: Sequence[StreamVariant]) -> list:
    """
    Extract quality, bandwidth, codecs and URL of every stream.
    Return list of metadata dicts.
    """
    streams = []
    for index, variant in enumerate(variants):
        streams.append({
            'index': index,
            'quality': variant.quality.value,
            'bandwidth': variant.bandwidth,
            'codecs': variant.codec,
            'url': variant.url
        })

    return streams
