# coding=utf-8
import logging

from xff.core.config import xff_config
from xff.core.errors import InvalidCIDR
from xff.core.networks import TrustSet

logger = logging.getLogger(__name__)


def load_trust_set(*, config=None):
    """
    Build the TrustSet for this process from configuration.

    Call once at startup and pass the result to whatever resolves addresses.
    An invalid subnet raises InvalidCIDR rather than starting with a partial
    set.
    """
    if config is not None:
        xff_config.set(**config)
    xff_config.log()

    try:
        trust_set = TrustSet.build(xff_config.value("allowed_subnets"))
    except InvalidCIDR as exc:
        logger.error("Invalid allowed_subnets entry %r", exc.literal)
        raise

    if not trust_set:
        logger.debug("No allowed_subnets configured, trusting every address")
    else:
        logger.debug("Trusting proxies in %s", ", ".join(str(p) for p in trust_set))
    return trust_set
