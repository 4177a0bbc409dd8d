"""Endpoint configuration: schema, loading and validation."""

import json
import logging
import os

from jsonschema import Draft7Validator
from singer_sdk import typing as th

from netsuite_endpoint.exceptions import ConfigurationError

LOGGER = logging.getLogger(__name__)

CONFIG_PATH_ENV = "NETSUITE_ENDPOINT_CONFIG"

METHODS_MAPPING = th.CustomType({
    "type": "array",
    "items": {"type": "object", "additionalProperties": {"type": ["string", "integer"]}},
    "minItems": 1
})

config_jsonschema = th.PropertiesList(
    th.Property("netsuite.email", th.StringType, required=True),
    th.Property("netsuite.password", th.StringType, required=True, secret=True),
    th.Property("netsuite.account", th.StringType, required=True),
    th.Property("netsuite.role", th.StringType),
    th.Property("netsuite.wsdl", th.StringType),
    th.Property("netsuite.shipping_methods_mapping", METHODS_MAPPING, required=True),
    th.Property("netsuite.payment_methods_mapping", METHODS_MAPPING, required=True),
    th.Property("netsuite.item_for_discounts", th.StringType),
    th.Property("netsuite.item_for_taxes", th.StringType),
    th.Property("netsuite.last_updated_after", th.DateTimeType),
    th.Property("netsuite.last_fulfillments_updated_after", th.DateTimeType),
    th.Property("log_level", th.StringType)
).to_dict()


def validate_config(config: dict) -> dict:
    errors = sorted(Draft7Validator(config_jsonschema).iter_errors(config), key=lambda e: list(e.path))
    if errors:
        details = "; ".join(
            f"{'.'.join(str(p) for p in error.path) or 'config'}: {error.message}" for error in errors
        )
        raise ConfigurationError(f"Invalid NetSuite endpoint configuration: {details}")
    return config


def load_config(path=None) -> dict:
    path = path or os.environ.get(CONFIG_PATH_ENV, "config.json")
    LOGGER.info(f"Loading configuration from {path}")
    try:
        with open(path) as config_file:
            config = json.load(config_file)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Unable to read configuration file {path}: {exc}") from exc

    return validate_config(config)
