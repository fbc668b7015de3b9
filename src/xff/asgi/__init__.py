import logging

from asgiref.compatibility import guarantee_single_callable

from xff.core import load_trust_set
from xff.core.config import xff_config
from xff.core.remote_addr import (
    get_remote_addr_if_allowed,
    join_host_port,
    split_host_port,
)

logger = logging.getLogger(__name__)


class XFFMiddleware:
    """
    Replaces ``scope["client"]`` with the client address resolved from the
    forwarded header, keeping the original in ``scope["xff.original_client"]``.

    Works for ASGI 2 and ASGI 3 applications, for HTTP and websocket scopes.
    """

    def __init__(self, app, trusted=None):
        self.app = guarantee_single_callable(app)
        if trusted is None:
            trusted = load_trust_set()
        self.trusted = trusted
        self.header = xff_config.value("header").lower().encode("latin1")
        self.debug = xff_config.value("debug")

    async def __call__(self, scope, receive, send):
        if scope["type"] in ("http", "websocket") and scope.get("client"):
            scope = self.resolve_scope(scope)
        await self.app(scope, receive, send)

    def resolve_scope(self, scope):
        # Repeated headers arrive separately; proxies may append a new one
        # rather than extending the existing value.
        values = [
            value.decode("latin1")
            for key, value in scope.get("headers", ())
            if key.lower() == self.header
        ]
        if not values:
            return scope

        host, port = scope["client"]
        header_value = ", ".join(values)
        peer = join_host_port(host, port)
        resolved = get_remote_addr_if_allowed(peer, header_value, self.trusted)
        if resolved == peer:
            return scope

        resolved_host, _ = split_host_port(resolved)
        if self.debug:
            logger.debug(
                "Rewriting client %s to %s from %r", host, resolved_host, header_value
            )
        return dict(
            scope, client=(resolved_host, port), **{"xff.original_client": (host, port)}
        )
