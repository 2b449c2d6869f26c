"""roombroker captions — captions user reference counting."""

from roombroker.captions.coordinator import CaptionsCoordinator

__all__ = ["CaptionsCoordinator"]
