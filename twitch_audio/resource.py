"""
Playable Twitch resource built from a parsed master playlist.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from twitch_audio import playlist_parser
from twitch_audio import quality_selector
from twitch_audio.playlist_parser import StreamVariant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwitchResource:
    """A channel's available streams and the one chosen for playback."""

    channel: str
    title: str
    streams: Tuple[StreamVariant, ...]
    selected: Optional[int] = None

    def with_selection(self, index: int) -> 'TwitchResource':
        return replace(self, selected=index)

    def play(self) -> Optional[str]:
        """
        Return the URL of the selected stream, or None if nothing valid is selected.
        """
        url = quality_selector.get_selected_url(self.streams, self.selected)
        if url is not None:
            logger.debug("Playing %s: %s", self.channel, self.streams[self.selected])
        return url


def build_resource(manifest_text: str, channel: str, title: str = None) -> TwitchResource:
    """
    Parse manifest text into a resource for the given channel.
    Title defaults to "Twitch channel: <channel>".
    """
    streams = playlist_parser.parse_manifest(manifest_text)
    if title is None:
        title = f"Twitch channel: {channel}"
    return TwitchResource(channel=channel, title=title, streams=streams)


def post_process(resource: TwitchResource) -> TwitchResource:
    """
    Select the audio_only stream of a resource.
    Return a new resource; raise NoAudioOnlyVariantError if there is none.
    """
    index = quality_selector.select_audio_only(resource.streams)
    return resource.with_selection(index)
