#!/usr/bin/env python3
"""
Main entry point: find the audio-only stream of a Twitch live manifest.
"""

import argparse
import logging
import os
import sys

from twitch_audio import metadata_extractor
from twitch_audio import playlist_parser
from twitch_audio import quality_selector
from twitch_audio import url_utils
from twitch_audio.errors import ManifestError, ManifestFetchError, NoAudioOnlyVariantError
from twitch_audio.resource import build_resource, post_process

from twitch_audio import __version__

EXIT_ERROR = 1
EXIT_NO_AUDIO_ONLY = 2


def format_bandwidth(bandwidth: int) -> str:
    if bandwidth >= 1000 * 1000:
        return f"{bandwidth / (1000 * 1000):.2f} Mbps"
    return f"{bandwidth / 1000:.0f} kbps"


def print_streams(streams):
    """
    Print one line per stream, in manifest order.
    """
    codec_info = metadata_extractor.extract_codec_info(streams)
    for info, codecs in zip(quality_selector.get_stream_info(streams), codec_info):
        kind = 'video' if codecs['has_video'] else 'audio'
        print(f"  [{info['index']}] {info['quality']:<10} {format_bandwidth(info['bandwidth']):>12}  "
              f"{kind}  {info['codecs'] or '-'}")
        print(f"      URL: {info['url']}")


def main(argv=None):
    """
    Main workflow: load manifest, parse, select audio_only stream, print URL.
    """
    parser = argparse.ArgumentParser(
        description='Select the audio-only stream from a Twitch HLS manifest',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Tokenised usher URL
  python player.py "https://usher.ttvnw.net/api/channel/hls/somechannel.m3u8?sig=...&token=..."

  # Manifest saved to disk
  python player.py somechannel.m3u8 --channel somechannel --list
        """
    )
    parser.add_argument('source', help='usher manifest URL or local manifest file')
    parser.add_argument('-c', '--channel', help='channel name (optional, taken from the URL when possible)')
    parser.add_argument('-l', '--list', action='store_true', help='list every stream in the manifest')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s | %(levelname)s | %(message)s')

    print(f"twitch-audio v{__version__}\n")

    source = args.source
    manifest_url = None

    # Step 1: Load manifest
    if os.path.isfile(source):
        print(f"Reading manifest file: {source}")
        try:
            manifest_text = playlist_parser.load_manifest(source)
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERROR: Failed to read manifest: {e}")
            return EXIT_ERROR
    elif url_utils.match_link(source):
        print(f"ERROR: {source} is the channel page of '{url_utils.extract_channel(source)}', not a manifest.")
        print("Pass the usher manifest URL (with its access token) instead.")
        return EXIT_ERROR
    else:
        print(f"Fetching manifest: {source}")
        try:
            manifest_text = playlist_parser.fetch_manifest(source)
        except ManifestFetchError as e:
            print(f"ERROR: {e}")
            return EXIT_ERROR
        manifest_url = source

    # Step 2: Channel identity
    channel = args.channel
    if not channel and manifest_url:
        channel = url_utils.extract_channel_from_manifest_url(manifest_url)

    # Step 3: Parse
    try:
        resource = build_resource(manifest_text, channel or 'unknown')
    except ManifestError as e:
        print(f"ERROR: Failed to parse manifest: {e}")
        return EXIT_ERROR

    if channel:
        print(f"{resource.title} ({url_utils.restore_link(channel)})")
    else:
        print(resource.title)
    print(f"Streams found: {len(resource.streams)}")

    if args.list:
        print_streams(resource.streams)
    print()

    # Step 4: Select audio_only stream
    try:
        resource = post_process(resource)
    except NoAudioOnlyVariantError as e:
        print(e)
        return EXIT_NO_AUDIO_ONLY

    stream_url = resource.play()
    if stream_url is None:
        print("ERROR: Selected stream is out of range")
        return EXIT_ERROR
    if not stream_url:
        print(f"ERROR: Stream [{resource.selected}] has no URL line")
        return EXIT_ERROR

    # Build absolute URL if relative
    if manifest_url and not stream_url.startswith('http'):
        base_url = url_utils.get_base_url(manifest_url)
        stream_url = url_utils.build_absolute_url(base_url, stream_url)

    selected = resource.streams[resource.selected]
    print(f"Selected stream [{resource.selected}]: {selected.quality.value}, {format_bandwidth(selected.bandwidth)}")
    print(stream_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
