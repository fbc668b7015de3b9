# coding=utf-8
import enum
from collections import namedtuple

from xff.core.networks import parse_address


class WalkState(enum.Enum):
    SCANNING = "scanning"
    # Hit an unparseable token after at least one trusted hop; the result is
    # the left-most trusted hop.
    STOPPED_WITH_CANDIDATE = "stopped_with_candidate"
    # Hit an unparseable token before any trusted hop; the result is "".
    UNUSABLE = "unusable"
    # Hit a valid address that isn't trusted; the result is that address.
    STOPPED_AT_TOKEN = "stopped_at_token"
    # Every token was a trusted address; the result is the left-most one.
    EXHAUSTED = "exhausted"


Walk = namedtuple("Walk", ["state", "address"])


def split_chain(header_value):
    """
    Split a forwarded header into trimmed tokens, left-most (earliest claimed
    hop) first. An empty header gives a single empty token.
    """
    return [token.strip() for token in header_value.split(",")]


def walk(tokens, is_trusted):
    """
    Walk the chain from the right-most (most recent) hop towards the left,
    accepting trusted proxies until the first hop we cannot vouch for.

    Returns a Walk recording the state the walk stopped in and the resolved
    address, which is the empty string when nothing can be believed.
    """
    state = WalkState.SCANNING
    candidate = ""
    for token in reversed(tokens):
        if parse_address(token) is None:
            # Never look past a break in parseability. If no trusted hop was
            # seen before it, the whole header is unusable.
            if candidate:
                state = WalkState.STOPPED_WITH_CANDIDATE
            else:
                state = WalkState.UNUSABLE
            break
        if not is_trusted(token):
            # Appended by the last proxy we trust, so this is the client.
            return Walk(WalkState.STOPPED_AT_TOKEN, token)
        candidate = token
    else:
        state = WalkState.EXHAUSTED

    return Walk(state, candidate)


def parse(header_value, is_trusted):
    """
    Resolve the client address from an X-Forwarded-For value.

    ``is_trusted`` is a callable taking an address string and returning
    whether that address belongs to a trusted proxy. Returns the resolved
    address verbatim, or "" if the header can't be trusted at all.
    """
    return walk(split_chain(header_value), is_trusted).address
