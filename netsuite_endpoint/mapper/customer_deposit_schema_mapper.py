from netsuite_endpoint.mapper.base_mapper import BaseMapper


class CustomerDepositSchemaMapper(BaseMapper):
    """Maps a paid storefront order to a customer deposit against its sales order"""

    def __init__(self, record, reference, sales_order: dict) -> None:
        super().__init__(record, reference)
        self.sales_order = sales_order

    def to_netsuite(self) -> dict:
        order = self.record
        return {
            "externalId": order.number,
            "customer": {"externalId": order.email},
            "salesOrder": self._map_sales_order(),
            "payment": order.totals.order,
            "paymentMethod": {"internalId": str(self.reference.payment_method_id(order.payment_method))},
        }

    def _map_sales_order(self):
        if self.sales_order.get("internalId"):
            return {"internalId": self.sales_order["internalId"]}
        return {"externalId": self.record.number}
