# coding=utf-8
import logging
import os

from xff.core.networks import DEFAULT_ALLOWED_SUBNETS

logger = logging.getLogger(__name__)


class XFFConfig:
    """
    Configuration object for resolving forwarded addresses.

    Contains a list of configuration "layers". When a configuration key is
    looked up, each layer is asked in turn if it knows the value. The first one
    to answer affirmatively returns the value.

    Values are meant to be read once, when a middleware or TrustSet is built,
    not on every request.
    """

    def __init__(self):
        self.layers = [
            Env(),
            Python(),
            Defaults(),
            Null(),
        ]

    def value(self, key):
        value = self.locate_layer_for_key(key).value(key)
        if key in CONVERSIONS:
            return CONVERSIONS[key](value)
        return value

    def locate_layer_for_key(self, key):
        for layer in self.layers:
            if layer.has_config(key):
                return layer

        # Should be unreachable because Null returns None for all keys.
        raise ValueError("key {!r} not found in any layer".format(key))

    def log(self):
        logger.debug("Configuration Loaded:")
        for key in self.known_keys:
            layer = self.locate_layer_for_key(key)
            logger.debug(
                "%-8s: %s = %s",
                layer.__class__.__name__,
                key,
                layer.value(key),
            )

    known_keys = [
        "allowed_subnets",
        "debug",
        "header",
    ]

    @classmethod
    def set(cls, **kwargs):
        """
        Sets a configuration value. Values set here will not override values
        set in ENV.
        """
        for key, value in kwargs.items():
            XFF_PYTHON_VALUES[key] = value

    @classmethod
    def unset(cls, *keys):
        """
        Removes a configuration value.
        """
        for key in keys:
            XFF_PYTHON_VALUES.pop(key, None)

    @classmethod
    def reset_all(cls):
        """
        Remove all configuration settings set via `XFFConfig.set(...)`.

        This is meant for use in testing.
        """
        XFF_PYTHON_VALUES.clear()


# Module-level data, the XFFConfig.set(key="value") adds to this
XFF_PYTHON_VALUES = {}


class Python:
    """
    A configuration overlay that lets other parts of python set values.
    """

    def has_config(self, key):
        return key in XFF_PYTHON_VALUES

    def value(self, key):
        return XFF_PYTHON_VALUES[key]


class Env:
    """
    Reads configuration from environment by prefixing the key
    requested with "XFF_"

    Example: the `allowed_subnets` config looks for XFF_ALLOWED_SUBNETS
    environment variable
    """

    def has_config(self, key):
        env_key = self.modify_key(key)
        return env_key in os.environ

    def value(self, key):
        env_key = self.modify_key(key)
        return os.environ[env_key]

    def modify_key(self, key):
        env_key = ("XFF_" + key).upper()
        return env_key


class Defaults:
    """
    Provides default values for important configurations
    """

    def __init__(self):
        self.defaults = {
            "allowed_subnets": list(DEFAULT_ALLOWED_SUBNETS),
            "debug": False,
            "header": "X-Forwarded-For",
        }

    def has_config(self, key):
        return key in self.defaults

    def value(self, key):
        return self.defaults[key]


class Null:
    """
    Always answers that a key is present, but the value is None

    Used as the last step of the layered configuration.
    """

    def has_config(self, key):
        return True

    def value(self, key):
        return None


def convert_to_bool(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in ("yes", "true", "t", "1")
    # Unknown type - default to false?
    return False


def convert_to_list(value):
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, str):
        # Split on commas
        return [item.strip() for item in value.split(",") if item.strip()]
    # Unknown type - default to empty?
    return []


CONVERSIONS = {
    "allowed_subnets": convert_to_list,
    "debug": convert_to_bool,
}


xff_config = XFFConfig()
