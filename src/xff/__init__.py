# coding=utf-8
from xff.api import (  # noqa: F401
    PRIVATE_SUBNETS,
    Config,
    ConfigError,
    InvalidCIDR,
    NetworkPrefix,
    TrustSet,
    get_remote_addr,
    get_remote_addr_if_allowed,
    load_trust_set,
    parse,
    trust_all,
)

__version__ = "1.0.0"
