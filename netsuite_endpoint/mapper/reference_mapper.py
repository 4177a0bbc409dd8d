"""Translates storefront enums (states, countries, shipping and payment methods,
tax/discount pseudo items) to NetSuite values and internal ids."""

import logging

from netsuite_endpoint.exceptions import ConfigurationError, RecordNotFoundInventoryItem

LOGGER = logging.getLogger(__name__)

STATES = {
    "Alabama": "AL", "Alaska": "AK", "Arizona": "AZ", "Arkansas": "AR", "California": "CA",
    "Colorado": "CO", "Connecticut": "CT", "Delaware": "DE", "District of Columbia": "DC",
    "Florida": "FL", "Georgia": "GA", "Hawaii": "HI", "Idaho": "ID", "Illinois": "IL",
    "Indiana": "IN", "Iowa": "IA", "Kansas": "KS", "Kentucky": "KY", "Louisiana": "LA",
    "Maine": "ME", "Maryland": "MD", "Massachusetts": "MA", "Michigan": "MI", "Minnesota": "MN",
    "Mississippi": "MS", "Missouri": "MO", "Montana": "MT", "Nebraska": "NE", "Nevada": "NV",
    "New Hampshire": "NH", "New Jersey": "NJ", "New Mexico": "NM", "New York": "NY",
    "North Carolina": "NC", "North Dakota": "ND", "Ohio": "OH", "Oklahoma": "OK", "Oregon": "OR",
    "Pennsylvania": "PA", "Rhode Island": "RI", "South Carolina": "SC", "South Dakota": "SD",
    "Tennessee": "TN", "Texas": "TX", "Utah": "UT", "Vermont": "VT", "Virginia": "VA",
    "Washington": "WA", "West Virginia": "WV", "Wisconsin": "WI", "Wyoming": "WY",
    "American Samoa": "AS", "Guam": "GU", "Northern Mariana Islands": "MP", "Puerto Rico": "PR",
    "Virgin Islands": "VI", "Armed Forces Americas": "AA", "Armed Forces Europe": "AE",
    "Armed Forces Pacific": "AP",
    "Alberta": "AB", "British Columbia": "BC", "Manitoba": "MB", "New Brunswick": "NB",
    "Newfoundland and Labrador": "NL", "Northwest Territories": "NT", "Nova Scotia": "NS",
    "Nunavut": "NU", "Ontario": "ON", "Prince Edward Island": "PE", "Quebec": "QC",
    "Saskatchewan": "SK", "Yukon": "YT",
}

# See the platformCommonTyp:Country enum of the 2013_2 schema browser
COUNTRIES = {
    "AR": "_argentina", "AT": "_austria", "AU": "_australia", "BE": "_belgium", "BR": "_brazil",
    "CA": "_canada", "CH": "_switzerland", "CL": "_chile", "CN": "_china", "CO": "_colombia",
    "CR": "_costaRica", "CZ": "_czechRepublic", "DE": "_germany", "DK": "_denmark",
    "DO": "_dominicanRepublic", "EC": "_ecuador", "ES": "_spain", "FI": "_finland", "FR": "_france",
    "GB": "_unitedKingdomGB", "GR": "_greece", "GT": "_guatemala", "HK": "_hongKong",
    "HU": "_hungary", "ID": "_indonesia", "IE": "_ireland", "IL": "_israel", "IN": "_india",
    "IS": "_iceland", "IT": "_italy", "JP": "_japan", "KR": "_koreaRepublicOf", "LU": "_luxembourg",
    "MX": "_mexico", "MY": "_malaysia", "NL": "_netherlands", "NO": "_norway", "NZ": "_newZealand",
    "PA": "_panama", "PE": "_peru", "PH": "_philippines", "PL": "_poland", "PR": "_puertoRico",
    "PT": "_portugal", "RO": "_romania", "RU": "_russianFederation", "SE": "_sweden",
    "SG": "_singapore", "TH": "_thailand", "TR": "_turkey", "TW": "_taiwan", "UA": "_ukraine",
    "US": "_unitedStates", "UY": "_uruguay", "VE": "_venezuela", "VN": "_vietnam",
    "ZA": "_southAfrica",
}

DEFAULT_ITEM_NAMES = {"tax": "Spree Tax", "discount": "Spree Discount"}
# item_for_discounts names both pseudo items; item_for_taxes only overrides the tax one
ITEM_NAME_CONFIG_KEYS = {
    "tax": ("netsuite.item_for_taxes", "netsuite.item_for_discounts"),
    "discount": ("netsuite.item_for_discounts",),
}
NON_INVENTORY_ITEM_TYPES = ("_nonInventoryItem",)


def state_by_name(name):
    """Full state name to its NetSuite code. Anything else is passed through."""
    if not name:
        return name
    return STATES.get(name.strip(), name)


def country_by_iso(iso):
    if not iso:
        return None
    if iso.startswith("_"):
        return iso
    country = COUNTRIES.get(iso.strip().upper())
    if country is None:
        LOGGER.warning(f"No NetSuite country for ISO code {iso}")
    return country


class ReferenceMapper:
    """Config and NetSuite backed lookups for one request.

    Non-inventory item ids are cached so each pseudo item is resolved at most once.
    """

    def __init__(self, config, ns_client) -> None:
        self.config = config
        self.ns_client = ns_client
        self._item_ids = {}

    def _method_id(self, config_key, label, method):
        mapping = self.config.get(config_key) or [{}]
        try:
            return int(mapping[0][method])
        except (KeyError, TypeError, ValueError, IndexError) as exc:
            raise ConfigurationError(f"{label} method {method} not found in {mapping!r}") from exc

    def shipping_id(self, method):
        return self._method_id("netsuite.shipping_methods_mapping", "Shipping", method)

    def payment_method_id(self, method):
        return self._method_id("netsuite.payment_methods_mapping", "Payment", method)

    def check_order_mappings(self, order, paid):
        """Resolves every configured mapping the order needs before anything is written."""
        self.shipping_id(order.shipping_method)
        if paid:
            self.payment_method_id(order.payment_method)

    def item_name_for(self, kind):
        for config_key in ITEM_NAME_CONFIG_KEYS[kind]:
            if self.config.get(config_key):
                return self.config[config_key]
        return DEFAULT_ITEM_NAMES[kind]

    def internal_id_for(self, kind):
        """Internal id of the non-inventory item carrying `kind` (tax or discount), created if missing."""
        name = self.item_name_for(kind)
        if name not in self._item_ids:
            item = self.ns_client.find_item(name, NON_INVENTORY_ITEM_TYPES)
            if item:
                internal_id = item["internalId"]
            else:
                LOGGER.info(f"Creating non-inventory item {name}")
                internal_id = self.ns_client.add("nonInventorySaleItem", {"itemId": name, "displayName": name})["internalId"]
            self._item_ids[name] = internal_id
        return self._item_ids[name]

    def inventory_item_id(self, sku):
        item = self.ns_client.find_item(sku)
        if not item:
            raise RecordNotFoundInventoryItem(sku, f"NetSuite Inventory Item not found for sku {sku}")
        return item["internalId"]
