"""Update acceptance policy.

Requests may overlap when the feed is slower than the poll interval, so
responses can complete out of order. Sequence numbers are assigned when a
request starts; only a response newer than the one last applied may win.
"""

from __future__ import annotations


def should_accept_update(*, cached_sequence: int | None, incoming_sequence: int) -> bool:
    if cached_sequence is None:
        return True
    return incoming_sequence > cached_sequence
