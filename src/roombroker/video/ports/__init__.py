"""Video provider ports."""

from roombroker.video.ports.outbound import VideoProvider

__all__ = ["VideoProvider"]
