from netsuite_endpoint.client import NetSuiteBaseSink
from netsuite_endpoint.mapper.product_message_mapper import ProductMessageMapper
from netsuite_endpoint.utils import next_watermark, parse_datetime


class ItemSink(NetSuiteBaseSink):
    record_type = "inventoryItem"

    def stock(self, sku):
        """Quantity available of `sku` over all locations, or None when NetSuite has no such item."""
        item = self.ns_client.find_item(sku)
        if item is None:
            self.logger.info(f"Inventory item {sku} not found")
            return None

        locations = (item.get("locationsList") or {}).get("locations") or []
        quantity = sum(float(location.get("quantityAvailable") or 0) for location in locations)
        return {"sku": sku, "quantity": int(quantity) if quantity.is_integer() else quantity}

    def products(self, since):
        items = self.ns_client.items_modified_after(parse_datetime(since))
        self.logger.info(f"{len(items)} inventory items modified after {since}")
        messages = [ProductMessageMapper(item).to_message() for item in items]
        return messages, next_watermark(item.get("lastModifiedDate") for item in items)
