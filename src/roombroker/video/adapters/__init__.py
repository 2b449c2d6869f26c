"""Video provider adapters."""

from roombroker.video.adapters.local import LocalVideoProvider

__all__ = ["LocalVideoProvider"]
