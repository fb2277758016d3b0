"""
Parse and validate Twitch master playlists, with zstd decompression support.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import requests
import zstandard as zstd

from twitch_audio.errors import (
    MalformedManifestError,
    ManifestFetchError,
    NoVariantsExtractedError,
)

logger = logging.getLogger(__name__)

MANIFEST_HEADER = '#EXTM3U'
TWITCH_INFO_DIRECTIVE = 'EXT-X-TWITCH-INFO'
MEDIA_DIRECTIVE = 'EXT-X-MEDIA'
STREAM_INF_DIRECTIVE = 'EXT-X-STREAM-INF'

# #NAME[:ATTR=VALUE[,ATTR=VALUE...]]
DIRECTIVE_PATTERN = re.compile(r'#([\w-]+)(?::(.*))?')
ATTRIBUTE_PATTERN = re.compile(r'([\w-]+)=("[^"]*"|[^,]+),?')
BANDWIDTH_PATTERN = re.compile(r'[0-9]+')
LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')

REQUEST_TIMEOUT = 30
ZSTD_MAGIC = b'\x28\xb5\x2f\xfd'
ZSTD_MAX_OUTPUT_SIZE = 10 * 1024 * 1024


class StreamQuality(Enum):
    UNKNOWN = 'unknown'
    CHUNKED = 'chunked'
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'
    MOBILE = 'mobile'
    AUDIO_ONLY = 'audio_only'

    @classmethod
    def from_tag(cls, tag: str) -> 'StreamQuality':
        """
        Map a VIDEO attribute value to a quality.
        Unrecognised tags map to UNKNOWN instead of failing.
        """
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class StreamVariant:
    """One playable rendition listed in a master playlist."""

    quality: StreamQuality = StreamQuality.UNKNOWN
    bandwidth: int = 0  # bits per second
    codec: str = ''
    url: str = ''


def strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_attributes(text: str) -> dict:
    """
    Parse an attribute list like PROGRAM-ID=1,CODECS="mp4a.40.2".
    Names are upper-cased; values are returned as written, quotes included.
    Parsing stops at the first entry that does not fit the grammar.
    """
    attributes = {}
    position = 0
    while position < len(text):
        match = ATTRIBUTE_PATTERN.match(text, position)
        if not match:
            break
        attributes[match.group(1).upper()] = match.group(2)
        position = match.end()
    return attributes


def parse_directive(line: str):
    """
    Split a directive line into (name, attributes).
    Return None if the line is not a directive.
    """
    match = DIRECTIVE_PATTERN.match(line)
    if not match:
        return None
    return match.group(1), parse_attributes(match.group(2) or '')


def build_variant(attributes: dict, url: str, line_number: int = None) -> StreamVariant:
    """
    Build a StreamVariant from parsed EXT-X-STREAM-INF attributes.
    """
    bandwidth = 0
    if 'BANDWIDTH' in attributes:
        value = attributes['BANDWIDTH']
        if not BANDWIDTH_PATTERN.fullmatch(value):
            raise MalformedManifestError(f"Invalid BANDWIDTH value: {value!r}", line_number)
        bandwidth = int(value)

    quality = StreamQuality.UNKNOWN
    if 'VIDEO' in attributes:
        quality = StreamQuality.from_tag(strip_quotes(attributes['VIDEO']))

    return StreamVariant(
        quality=quality,
        bandwidth=bandwidth,
        codec=strip_quotes(attributes.get('CODECS', '')),
        url=url,
    )


def _read_variant_block(lines: list, position: int):
    """
    Read the EXT-X-STREAM-INF directive and URL following an EXT-X-MEDIA line.
    `position` is the index of the line right after EXT-X-MEDIA.
    Return (variant, index of the next unread line).
    """
    line_number = position + 1
    stream_info = lines[position] if position < len(lines) else ''
    directive = parse_directive(stream_info) if stream_info.strip() else None

    if directive is None or directive[0] != STREAM_INF_DIRECTIVE:
        logger.debug("Line %d: expected %s, got %r", line_number, STREAM_INF_DIRECTIVE, stream_info)
        raise MalformedManifestError(
            f"{MEDIA_DIRECTIVE} is not followed by {STREAM_INF_DIRECTIVE}", line_number
        )

    # the URL line is taken as-is, even when it is missing
    url = lines[position + 1] if position + 1 < len(lines) else ''
    variant = build_variant(directive[1], url, line_number)
    return variant, position + 2


def parse_manifest(text: str) -> tuple:
    """
    Parse master playlist text into StreamVariants, in manifest order.

    The first non-empty line must be #EXTM3U. Scanning stops at the first
    empty line; whitespace-only lines are skipped like any non-directive.
    Each EXT-X-MEDIA directive must be directly followed by an
    EXT-X-STREAM-INF directive and then the variant URL.

    Raises MalformedManifestError for structural errors and
    NoVariantsExtractedError if nothing was listed.
    """
    # CR, LF and CRLF only
    lines = LINE_BREAK_PATTERN.split(text)

    position = 0
    while position < len(lines) and not lines[position]:
        position += 1

    if position >= len(lines) or lines[position] != MANIFEST_HEADER:
        raise MalformedManifestError(f"Missing {MANIFEST_HEADER} header", position + 1)
    position += 1

    variants = []
    while position < len(lines):
        line = lines[position]
        if not line:
            break

        directive = parse_directive(line)
        position += 1
        if directive is None:
            continue

        name = directive[0]
        if name == MEDIA_DIRECTIVE:
            variant, position = _read_variant_block(lines, position)
            logger.debug("Variant %d: %s", len(variants), variant)
            variants.append(variant)
        elif name == TWITCH_INFO_DIRECTIVE:
            logger.debug("Skipping %s", TWITCH_INFO_DIRECTIVE)

    if not variants:
        raise NoVariantsExtractedError("No stream variants found in manifest")

    return tuple(variants)


def get_request_headers():
    """
    Get browser-like headers for usher playlist requests.
    """
    return {
        'accept': 'application/x-mpegURL, application/vnd.apple.mpegurl, */*',
        'accept-encoding': 'gzip, deflate, br, zstd',
        'accept-language': 'en-US,en;q=0.9',
        'cache-control': 'no-cache',
        'origin': 'https://www.twitch.tv',
        'pragma': 'no-cache',
        'referer': 'https://www.twitch.tv/',
        'user-agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36'
    }


def decompress_zstd(raw_bytes: bytes) -> bytes:
    """
    Decompress zstd-compressed content.
    Check for zstd magic bytes: 0x28 0xB5 0x2F 0xFD
    """
    if len(raw_bytes) < 4 or raw_bytes[:4] != ZSTD_MAGIC:
        return raw_bytes

    try:
        dctx = zstd.ZstdDecompressor()
        return dctx.decompress(raw_bytes, max_output_size=ZSTD_MAX_OUTPUT_SIZE)
    except zstd.ZstdError as e:
        # frames written without a content size need the streaming reader
        try:
            dctx = zstd.ZstdDecompressor()
            decompressed = bytearray()
            with dctx.stream_reader(raw_bytes) as reader:
                while True:
                    chunk = reader.read(8192)
                    if not chunk:
                        break
                    decompressed.extend(chunk)
            return bytes(decompressed)
        except zstd.ZstdError as e2:
            raise ManifestFetchError(f"Failed to decompress zstd content: {e}, stream failed: {e2}") from e2


def fetch_manifest(url: str, session: requests.Session = None) -> str:
    """
    Fetch manifest text from a (tokenised) usher URL.
    Handle zstd decompression.
    The session, if given, is left open.
    """
    http = session if session is not None else requests
    try:
        response = http.get(url, headers=get_request_headers(), timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise ManifestFetchError(f"Failed to fetch manifest: {e}") from e

    raw_bytes = response.content
    logger.debug("Fetched %d bytes from %s", len(raw_bytes), url)
    content = decompress_zstd(raw_bytes)

    try:
        return content.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise ManifestFetchError(f"Manifest is not valid UTF-8: {e}") from e


def load_manifest(path) -> str:
    """
    Read manifest text from a local file.
    """
    return Path(path).read_text(encoding='utf-8-sig')
