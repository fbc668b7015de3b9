# coding=utf-8
import logging

import wrapt

from xff.core import load_trust_set
from xff.core.config import xff_config
from xff.core.remote_addr import (
    get_remote_addr_if_allowed,
    join_host_port,
    split_host_port,
)

logger = logging.getLogger(__name__)


def environ_key(header):
    return "HTTP_" + header.upper().replace("-", "_")


def wrap_wsgi_application(application, trusted=None):
    """
    Wrap a WSGI application so that REMOTE_ADDR holds the client address
    resolved from the forwarded header. The address the server saw is kept
    in ``environ["xff.original_remote_addr"]``.

    ``trusted`` is a TrustSet or any callable taking an address string. When
    omitted one is built from configuration, once.
    """
    if trusted is None:
        trusted = load_trust_set()
    header_key = environ_key(xff_config.value("header"))
    debug = xff_config.value("debug")

    @wrapt.decorator
    def xff_wrapped_application(wrapped, instance, args, kwargs):
        environ = args[0] if args else kwargs["environ"]
        header_value = environ.get(header_key)
        remote_addr = environ.get("REMOTE_ADDR")
        if header_value is not None and remote_addr:
            peer = join_host_port(remote_addr, environ.get("REMOTE_PORT") or "0")
            resolved = get_remote_addr_if_allowed(peer, header_value, trusted)
            if resolved != peer:
                host, _ = split_host_port(resolved)
                if debug:
                    logger.debug(
                        "Rewriting REMOTE_ADDR %s to %s from %r",
                        remote_addr,
                        host,
                        header_value,
                    )
                environ["xff.original_remote_addr"] = remote_addr
                environ["REMOTE_ADDR"] = host
        return wrapped(*args, **kwargs)

    return xff_wrapped_application(application)
