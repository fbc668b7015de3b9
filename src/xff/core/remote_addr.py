# coding=utf-8
import logging

from xff.core.chain import parse

logger = logging.getLogger(__name__)


def split_host_port(address):
    """
    Split "host:port" or "[host]:port" into (host, port). Raises ValueError
    for anything else, including an unbracketed host containing colons.
    """
    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise ValueError("missing ']' in address: {!r}".format(address))
        host = address[1:end]
        rest = address[end + 1 :]
        if not rest.startswith(":"):
            raise ValueError("missing port in address: {!r}".format(address))
        port = rest[1:]
        if ":" in port:
            raise ValueError("too many colons in address: {!r}".format(address))
    else:
        host, sep, port = address.rpartition(":")
        if not sep:
            raise ValueError("missing port in address: {!r}".format(address))
        if ":" in host:
            raise ValueError("too many colons in address: {!r}".format(address))

    if "[" in host or "]" in host or "[" in port or "]" in port:
        raise ValueError("unexpected bracket in address: {!r}".format(address))
    return host, port


def join_host_port(host, port):
    if ":" in host:
        return "[{}]:{}".format(host, port)
    return "{}:{}".format(host, port)


def get_remote_addr(peer, header_value, is_trusted):
    """
    Return the address to treat as the remote end of the request.

    ``peer`` is the socket address the server saw ("host:port" or
    "[host]:port") and ``header_value`` the raw X-Forwarded-For value, or
    None when the request didn't carry one. When the chain resolves to an
    address it replaces the peer host and the peer port is kept; otherwise
    the peer is returned unchanged.
    """
    if header_value is None:
        return peer

    try:
        _, port = split_host_port(peer)
    except ValueError:
        logger.debug("Unable to split peer address %r, keeping it", peer)
        return peer

    resolved = parse(header_value, is_trusted)
    if not resolved:
        return peer
    return join_host_port(resolved, port)


def get_remote_addr_if_allowed(peer, header_value, is_trusted):
    """
    As get_remote_addr, but only consults the header when the peer itself is
    trusted, i.e. the request came in through one of our proxies.
    """
    if header_value is None:
        return peer

    try:
        host, _ = split_host_port(peer)
    except ValueError:
        logger.debug("Unable to split peer address %r, keeping it", peer)
        return peer

    if not host or not is_trusted(host):
        return peer
    return get_remote_addr(peer, header_value, is_trusted)
