# coding=utf-8
import ipaddress
import re

from xff.core.errors import InvalidCIDR

prefix_length_regex = re.compile(r"[0-9]{1,3}")

# Loopback and private-use ranges of both families. Not the default: an
# empty list (trust every address) is, see DEFAULT_ALLOWED_SUBNETS.
PRIVATE_SUBNETS = (
    "127.0.0.0/8",
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.0.0/16",
    "::1/128",
    "fc00::/7",
)

DEFAULT_ALLOWED_SUBNETS = ()


def parse_address(value):
    """
    Parse a bare IPv4 or IPv6 literal, returning an ``ipaddress`` object or
    None. Brackets, ports and zone identifiers are not accepted.
    """
    if not isinstance(value, str) or "%" in value:
        return None
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        return None


class NetworkPrefix:
    """
    A single CIDR range, e.g. ``10.0.0.0/8``. Immutable once parsed.
    """

    __slots__ = ("_network",)

    def __init__(self, network):
        self._network = network

    @classmethod
    def parse(cls, literal):
        """
        Parse an ``address/length`` literal. Host bits are masked off, so
        ``10.1.2.3/8`` becomes ``10.0.0.0/8``. Raises InvalidCIDR.
        """
        if not isinstance(literal, str):
            raise InvalidCIDR(literal)
        address, sep, length = literal.strip().partition("/")
        if (
            not sep
            or prefix_length_regex.fullmatch(length) is None
            or parse_address(address) is None
        ):
            raise InvalidCIDR(literal)
        try:
            network = ipaddress.ip_network(address + "/" + length, strict=False)
        except ValueError:
            raise InvalidCIDR(literal)
        return cls(network)

    @property
    def base(self):
        return self._network.network_address

    @property
    def prefix_length(self):
        return self._network.prefixlen

    @property
    def version(self):
        return self._network.version

    def __contains__(self, address):
        # ipaddress does not compare families on its own
        return address.version == self.version and address in self._network

    def __eq__(self, other):
        if not isinstance(other, NetworkPrefix):
            return NotImplemented
        return self._network == other._network

    def __hash__(self):
        return hash(self._network)

    def __str__(self):
        return str(self._network)

    def __repr__(self):
        return "NetworkPrefix({!r})".format(str(self._network))


class TrustSet:
    """
    The networks whose proxies are trusted to append accurate addresses to
    the forwarded chain.

    An empty TrustSet trusts every address, it does not trust none. Order is
    kept from the configuration but has no effect on membership.

    Instances are immutable and may be shared between any number of
    concurrent requests. They are callable, so a TrustSet can be passed
    anywhere a trust predicate is expected.
    """

    __slots__ = ("_prefixes",)

    def __init__(self, prefixes=()):
        self._prefixes = tuple(prefixes)

    @classmethod
    def build(cls, cidrs):
        """
        Build a TrustSet from CIDR strings, stopping at the first invalid one
        with InvalidCIDR.
        """
        if isinstance(cidrs, str):
            # A lone string would otherwise be walked character by character.
            raise InvalidCIDR(cidrs)
        return cls(NetworkPrefix.parse(cidr) for cidr in cidrs)

    @property
    def prefixes(self):
        return self._prefixes

    def is_trusted(self, address):
        if not self._prefixes:
            return True

        parsed = parse_address(address)
        if parsed is None:
            return False
        return any(parsed in prefix for prefix in self._prefixes)

    __call__ = is_trusted

    def __iter__(self):
        return iter(self._prefixes)

    def __len__(self):
        return len(self._prefixes)

    def __eq__(self, other):
        if not isinstance(other, TrustSet):
            return NotImplemented
        return self._prefixes == other._prefixes

    def __hash__(self):
        return hash(self._prefixes)

    def __repr__(self):
        return "TrustSet([{}])".format(", ".join(repr(str(p)) for p in self))


def trust_all(address):
    return True
