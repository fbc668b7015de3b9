# coding=utf-8


class ConfigError(Exception):
    """Raised when the trusted proxy configuration cannot be used."""


class InvalidCIDR(ConfigError):
    def __init__(self, literal):
        super().__init__("invalid CIDR address: {}".format(literal))
        self.literal = literal
