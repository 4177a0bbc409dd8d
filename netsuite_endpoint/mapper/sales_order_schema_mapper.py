from netsuite_endpoint.mapper.base_mapper import BaseMapper
from netsuite_endpoint.mapper.sales_order_line_item_schema_mapper import SalesOrderLineItemSchemaMapper
from netsuite_endpoint.utils import parse_datetime

# Basic Sales Order Form
SALES_ORDER_CUSTOM_FORM_ID = "164"
PENDING_FULFILLMENT = "_pendingFulfillment"


class SalesOrderSchemaMapper(BaseMapper):
    """A class responsible for mapping a storefront order to a NetSuite sales order.

    Taxes and discounts cannot be expressed on NetSuite order lines without
    NetSuite recomputing them, so each positive total in `ADJUSTMENT_LINE_TYPES`
    is carried as an extra line on a non-inventory item, priced at the total.
    Shipping is carried by `shippingCost`.
    """

    ADJUSTMENT_LINE_TYPES = ("tax", "discount")

    def __init__(self, record, reference, customer_ref) -> None:
        super().__init__(record, reference)
        self.customer_ref = customer_ref

    def to_netsuite(self) -> dict:
        """Transforms the storefront order into a NetSuite-compatible payload."""
        order = self.record

        payload = {
            "orderStatus": PENDING_FULFILLMENT,
            "customForm": {"internalId": SALES_ORDER_CUSTOM_FORM_ID},
            "externalId": order.number,
            "entity": self.customer_ref,
            "itemList": {"item": self._map_line_items() + self._map_adjustment_lines()},
            **self._map_shipping(),
            "transactionBillAddress": self._map_transaction_address(order.billing_address, "bill"),
            "transactionShipAddress": self._map_transaction_address(order.shipping_address, "ship"),
            "tranDate": parse_datetime(order.placed_on),
        }

        return self._compact(payload)

    def _map_line_items(self):
        return [
            SalesOrderLineItemSchemaMapper(line_item, self.reference).to_netsuite()
            for line_item in self.record.line_items
        ]

    def _map_adjustment_lines(self):
        lines = []
        for kind in self.ADJUSTMENT_LINE_TYPES:
            value = getattr(self.record.totals, kind) or 0
            if value > 0:
                lines.append({
                    "item": {"internalId": self.reference.internal_id_for(kind)},
                    "rate": value
                })
        return lines

    def _map_shipping(self):
        return {
            "shippingCost": self.record.totals.shipping,
            "shipMethod": {"internalId": str(self.reference.shipping_id(self.record.shipping_method))}
        }
