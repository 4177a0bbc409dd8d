"""SOAP transport for the NetSuite web services, pinned to API version 2013_2."""

import logging
from functools import cached_property
from time import time

import requests
from zeep import Client
from zeep.exceptions import Fault, TransportError
from zeep.transports import Transport

from netsuite_endpoint.exceptions import NetSuiteTransportError

LOGGER = logging.getLogger(__name__)

API_VERSION = "2013_2"
WSDL_URL = "https://webservices.na1.netsuite.com/wsdl/v2013_2_0/netsuite.wsdl"
READ_TIMEOUT = 175
SEARCH_PAGE_SIZE = 100


class NetsuiteSoapClient:
    """Owns the zeep client and the passport used on every call.

    Built once per process; never mutated while handling requests.
    """

    valid_responses = ("writeResponse", "readResponse", "searchResult")

    def __init__(self, config, session=None):
        self.config = config
        self.session = session or requests.Session()
        self._types = {}

    @cached_property
    def account(self):
        return self.config["netsuite.account"]

    @cached_property
    def wsdl_url(self):
        return self.config.get("netsuite.wsdl") or WSDL_URL

    @cached_property
    def datacenter_url(self):
        host = self.wsdl_url.split("/wsdl/")[0]
        return f"{host}/services/NetSuitePort_{API_VERSION}"

    @cached_property
    def transport(self):
        return Transport(session=self.session, timeout=30, operation_timeout=READ_TIMEOUT)

    @cached_property
    def client(self):
        LOGGER.info(f"Loading NetSuite WSDL {self.wsdl_url}")
        return Client(self.wsdl_url, transport=self.transport)

    @cached_property
    def service_proxy(self):
        proxy_url = f"{{urn:platform_{API_VERSION}.webservices.netsuite.com}}NetSuiteBinding"
        return self.client.create_service(proxy_url, self.datacenter_url)

    def type(self, type_name):
        """Looks up a WSDL complex type (`SalesOrder`, `RecordRef`, ...) by its local name."""
        if type_name not in self._types:
            ns_type = next(
                (t for t in self.client.wsdl.types.types if t.name and t.name == type_name),
                None
            )
            if ns_type is None:
                raise ValueError(f"Unknown NetSuite type {type_name} in {self.wsdl_url}")
            self._types[type_name] = ns_type
        return self._types[type_name]

    def build_passport(self):
        passport = {
            "email": self.config["netsuite.email"],
            "password": self.config["netsuite.password"],
            "account": self.account,
        }
        if self.config.get("netsuite.role"):
            passport["role"] = self.type("RecordRef")(internalId=self.config["netsuite.role"])
        return self.type("Passport")(**passport)

    def build_headers(self, include_search_preferences: bool = False):
        soapheaders = {"passport": self.build_passport()}
        if include_search_preferences:
            search_preferences = self.type("SearchPreferences")
            soapheaders["searchPreferences"] = search_preferences(
                bodyFieldsOnly=False,
                pageSize=SEARCH_PAGE_SIZE,
                returnSearchColumns=False,
            )
        return soapheaders

    def request(self, name, *args, **kwargs):
        """Calls a NetSuite operation and returns its write/read/search result."""
        method = getattr(self.service_proxy, name)
        headers = self.build_headers(include_search_preferences=name.startswith("search"))

        request_start_time = time()
        try:
            response = method(*args, _soapheaders=headers, **kwargs)
        except Fault as exc:
            raise NetSuiteTransportError(f"NetSuite {name} fault: {exc.message}") from exc
        except (TransportError, requests.RequestException) as exc:
            raise NetSuiteTransportError(f"NetSuite {name} request failed: {exc}") from exc
        request_duration = time() - request_start_time

        result = self.unwrap(name, response)
        request_status = "SUCCESS" if result.status.isSuccess else "ERROR"
        LOGGER.info(f"NetSuite {name} finished in {round(request_duration, 4)}s with status {request_status}")
        return result

    def unwrap(self, name, response):
        body = getattr(response, "body", response)
        for attr in self.valid_responses:
            result = getattr(body, attr, None)
            if result is not None:
                return result
        raise NetSuiteTransportError(f"Unexpected NetSuite response for {name}: {response}")
