"""State/store layer.

Completed poll cycles are turned into :class:`FeedEvent` objects; the store
is the only component that folds them into the render state.
"""

from pympk.state.events import FeedEvent
from pympk.state.policy import should_accept_update
from pympk.state.store import ViewState, ViewStateStore

__all__ = ["FeedEvent", "ViewState", "ViewStateStore", "should_accept_update"]
