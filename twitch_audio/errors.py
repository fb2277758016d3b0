"""
Exception types raised while reading manifests and selecting streams.
"""


class TwitchAudioError(Exception):
    """
    Base class for all errors raised by this package.
    """


class ManifestError(TwitchAudioError, ValueError):
    """
    The manifest text could not be turned into a variant list.
    """


class MalformedManifestError(ManifestError):
    """
    Wrong or missing header, an EXT-X-MEDIA directive without its
    EXT-X-STREAM-INF follower, or an unparsable numeric attribute.
    """

    def __init__(self, message: str, line_number: int = None):
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)
        self.line_number = line_number


class NoVariantsExtractedError(ManifestError):
    """
    The manifest is well formed but lists no stream variants.
    """


class NoAudioOnlyVariantError(TwitchAudioError, LookupError):
    """
    The manifest is valid but has no audio_only stream.
    """

    def __init__(self, message: str = "The stream has no audio_only version."):
        super().__init__(message)


class ManifestFetchError(TwitchAudioError, RuntimeError):
    """
    The manifest could not be downloaded or decompressed.
    """
