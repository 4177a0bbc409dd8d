from netsuite_endpoint.mapper.base_mapper import BaseMapper


class ItemFulfillmentSchemaMapper(BaseMapper):
    """Maps a storefront shipment to an item fulfillment of its sales order"""

    def __init__(self, record, sales_order: dict) -> None:
        super().__init__(record)
        self.sales_order = sales_order

    def to_netsuite(self) -> dict:
        payload = {
            "createdFrom": {"internalId": self.sales_order["internalId"]},
            "transactionShipAddress": self._map_transaction_address(self.record.shipping_address, "ship"),
        }
        return self._compact(payload)
