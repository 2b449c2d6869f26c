"""roombroker video — provider port and the local adapter."""

from roombroker.video.adapters.local import LocalVideoProvider
from roombroker.video.ports.outbound import VideoProvider

__all__ = ["LocalVideoProvider", "VideoProvider"]
