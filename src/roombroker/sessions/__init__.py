"""roombroker sessions — room records and the session registry."""

from roombroker.sessions.models import CaptionsState, SessionRecord
from roombroker.sessions.registry import SessionRegistry

__all__ = ["CaptionsState", "SessionRecord", "SessionRegistry"]
