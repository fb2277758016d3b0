"""
Extract codec metadata from parsed stream variants.
"""

from typing import Sequence

from twitch_audio.playlist_parser import StreamVariant

VIDEO_CODECS = ('avc1', 'hvc1', 'hev1', 'av01', 'vp09')
AUDIO_CODECS = ('mp4a', 'ac-3', 'ec-3', 'opus')


def split_codecs(codec: str) -> dict:
    """
    Split a CODECS value into its video and audio parts.
    Return: {video_codec, audio_codec}
    """
    video_codec = None
    audio_codec = None

    for entry in codec.split(','):
        entry = entry.strip()
        if not entry:
            continue
        if entry.lower().startswith(VIDEO_CODECS):
            video_codec = entry
        elif entry.lower().startswith(AUDIO_CODECS):
            audio_codec = entry

    return {
        'video_codec': video_codec,
        'audio_codec': audio_codec
    }


def extract_codec_info(variants: Sequence[StreamVariant]) -> list:
    """
    Extract codec information for every stream, in manifest order.
    Return: [{video_codec, audio_codec, bandwidth, has_video}]
    """
    codec_info = []
    for variant in variants:
        info = split_codecs(variant.codec)
        info['bandwidth'] = variant.bandwidth
        info['has_video'] = info['video_codec'] is not None
        codec_info.append(info)

    return codec_info
