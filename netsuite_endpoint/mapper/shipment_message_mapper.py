from netsuite_endpoint.mapper.reference_mapper import state_by_name
from netsuite_endpoint.utils import iso_string, normalize_country_name, strip_enum_prefix


class ShipmentMessageMapper:
    """Maps a NetSuite item fulfillment to an outbound `shipment` message.

    `sales_order` is the fulfillment's source sales order; its external id is
    the storefront order number.
    """

    def __init__(self, fulfillment: dict, sales_order: dict) -> None:
        self.fulfillment = fulfillment
        self.sales_order = sales_order or {}

    def to_message(self) -> dict:
        fulfillment = self.fulfillment
        return {
            "id": fulfillment.get("internalId"),
            "order_id": self.sales_order.get("externalId"),
            "cost": fulfillment.get("shippingCost"),
            "status": strip_enum_prefix(fulfillment.get("shipStatus")),
            "shipping_method": (fulfillment.get("shipMethod") or {}).get("name"),
            "tracking": self._map_tracking(),
            "shipped_at": iso_string(fulfillment.get("tranDate")),
            "shipping_address": self._map_shipping_address(),
            "items": self._map_items(),
        }

    def _map_tracking(self):
        packages = (self.fulfillment.get("packageList") or {}).get("package") or []
        return ", ".join(package["packageTrackingNumber"] for package in packages if package.get("packageTrackingNumber"))

    def _map_shipping_address(self):
        address = self.fulfillment.get("transactionShipAddress")
        if not address or not address.get("shipAddressee"):
            return None

        firstname, _, lastname = address["shipAddressee"].partition(" ")
        return {
            "firstname": firstname,
            "lastname": lastname or None,
            "address1": address.get("shipAddr1"),
            "address2": address.get("shipAddr2"),
            "zipcode": address.get("shipZip"),
            "city": address.get("shipCity"),
            "state": state_by_name(address.get("shipState")),
            "country": normalize_country_name(address.get("shipCountry")),
            "phone": address.get("shipPhone"),
        }

    def _map_items(self):
        lines = (self.fulfillment.get("itemList") or {}).get("item") or []
        items = []
        for line in lines:
            name = (line.get("item") or {}).get("name")
            items.append({"name": name, "product_id": name, "quantity": int(line.get("quantity") or 0)})
        return items
