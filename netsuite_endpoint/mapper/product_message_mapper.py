from netsuite_endpoint.utils import iso_string


class ProductMessageMapper:
    """Maps a NetSuite inventory item to an outbound `product` message"""

    def __init__(self, item: dict) -> None:
        self.item = item

    def to_message(self) -> dict:
        item = self.item
        return {
            "id": item.get("itemId"),
            "sku": item.get("itemId"),
            "name": item.get("displayName") or item.get("itemId"),
            "description": item.get("salesDescription"),
            "price": self._map_price(),
            "cost_price": item.get("cost"),
            "available_on": iso_string(item.get("createdDate")),
            "updated_at": iso_string(item.get("lastModifiedDate")),
        }

    def _map_price(self):
        # first price of the first price level
        pricing = (self.item.get("pricingMatrix") or {}).get("pricing") or []
        for level in pricing:
            prices = (level.get("priceList") or {}).get("price") or []
            if prices:
                return prices[0].get("value")
        return None
