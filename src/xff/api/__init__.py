# coding=utf-8
from xff.core import load_trust_set
from xff.core.chain import parse
from xff.core.config import XFFConfig
from xff.core.errors import ConfigError, InvalidCIDR
from xff.core.networks import (
    PRIVATE_SUBNETS,
    NetworkPrefix,
    TrustSet,
    trust_all,
)
from xff.core.remote_addr import get_remote_addr, get_remote_addr_if_allowed

__all__ = [
    "Config",
    "ConfigError",
    "InvalidCIDR",
    "NetworkPrefix",
    "PRIVATE_SUBNETS",
    "TrustSet",
    "get_remote_addr",
    "get_remote_addr_if_allowed",
    "load_trust_set",
    "parse",
    "trust_all",
]


class Config(XFFConfig):
    pass
