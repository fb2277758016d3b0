"""Shared manifest fixtures."""

import pytest


TWITCH_MANIFEST = """#EXTM3U
#EXT-X-TWITCH-INFO:NODE="video-edge-c2a6b4.fra02",MANIFEST-NODE="video-weaver.fra02",SERVER-TIME="1475849346.93",USER-IP="127.0.0.1",CLUSTER="fra02",MANIFEST-CLUSTER="fra02",ORIGIN="s3",B="false",REGION="EU",BROADCAST-ID="23443212336",STREAM-TIME="7523.9"
#EXT-X-MEDIA:TYPE=VIDEO,GROUP-ID="chunked",NAME="Source",AUTOSELECT=YES,DEFAULT=YES
#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=3417224,CODECS="avc1.4D4029,mp4a.40.2",VIDEO="chunked"
http://video-edge.example/v1/playlist/chunked.m3u8
#EXT-X-MEDIA:TYPE=VIDEO,GROUP-ID="high",NAME="High",AUTOSELECT=YES,DEFAULT=YES
#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=1760000,RESOLUTION=1280x720,CODECS="avc1.66.31,mp4a.40.2",VIDEO="high"
http://video-edge.example/v1/playlist/high.m3u8
#EXT-X-MEDIA:TYPE=VIDEO,GROUP-ID="low",NAME="Low",AUTOSELECT=YES,DEFAULT=YES
#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=500000,RESOLUTION=640x360,CODECS="avc1.66.30,mp4a.40.2",VIDEO="low"
http://video-edge.example/v1/playlist/low.m3u8
#EXT-X-MEDIA:TYPE=VIDEO,GROUP-ID="audio_only",NAME="Audio Only",AUTOSELECT=NO,DEFAULT=NO
#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=128000,CODECS="mp4a.40.2",VIDEO="audio_only"
http://video-edge.example/v1/playlist/audio_only.m3u8

"""

AUDIO_ONLY_MANIFEST = """#EXTM3U
#EXT-X-TWITCH-INFO:...
#EXT-X-MEDIA:TYPE=AUDIO
#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=128000,CODECS="mp4a.40.2",VIDEO="audio_only"
http://example/audio.m3u8

"""

VIDEO_ONLY_MANIFEST = """#EXTM3U
#EXT-X-MEDIA:TYPE=VIDEO,GROUP-ID="high",NAME="High"
#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=1760000,CODECS="avc1.66.31,mp4a.40.2",VIDEO="high"
http://example/high.m3u8
#EXT-X-MEDIA:TYPE=VIDEO,GROUP-ID="mobile",NAME="Mobile"
#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=280000,CODECS="avc1.42C00D,mp4a.40.2",VIDEO="mobile"
http://example/mobile.m3u8
"""


@pytest.fixture
def twitch_manifest():
    return TWITCH_MANIFEST


@pytest.fixture
def audio_only_manifest():
    return AUDIO_ONLY_MANIFEST


@pytest.fixture
def video_only_manifest():
    return VIDEO_ONLY_MANIFEST
