from netsuite_endpoint.client import NetSuiteBaseSink
from netsuite_endpoint.mapper.invoice_schema_mapper import InvoiceSchemaMapper
from netsuite_endpoint.mapper.item_fulfillment_schema_mapper import ItemFulfillmentSchemaMapper
from netsuite_endpoint.mapper.shipment_message_mapper import ShipmentMessageMapper
from netsuite_endpoint.sink.sales_order_sink import PENDING_BILLING, PENDING_FULFILLMENT
from netsuite_endpoint.utils import next_watermark, parse_datetime

ITEM_FULFILLMENT = "_itemFulfillment"


class ShipmentSink(NetSuiteBaseSink):
    record_type = "itemFulfillment"

    def push(self, shipment) -> dict:
        """Fulfills and bills the sales order of a storefront shipment.

        An order pending fulfillment gets an item fulfillment, after which
        NetSuite holds it as pending billing, so it is invoiced in the same call.
        """
        sales_order = self.get_sales_order(shipment.order_external_id)
        status = sales_order.get("status")

        fulfilled = False
        if status == PENDING_FULFILLMENT:
            payload = ItemFulfillmentSchemaMapper(shipment, sales_order).to_netsuite()
            self.ns_client.add(self.record_type, payload)
            fulfilled = True

        if fulfilled or status == PENDING_BILLING:
            self.ns_client.add("invoice", InvoiceSchemaMapper(sales_order).to_netsuite())

        return sales_order

    def pull(self, since):
        """Item fulfillments modified after `since` as shipment messages, plus the next watermark."""
        fulfillments = self.ns_client.transactions_modified_after(ITEM_FULFILLMENT, parse_datetime(since))
        self.logger.info(f"{len(fulfillments)} item fulfillments modified after {since}")

        sales_orders = {}
        messages = []
        for fulfillment in fulfillments:
            sales_order_id = (fulfillment.get("createdFrom") or {}).get("internalId")
            if sales_order_id is None:
                self.logger.warning(f"Item fulfillment {fulfillment.get('internalId')} has no sales order")
            elif sales_order_id not in sales_orders:
                sales_orders[sales_order_id] = self.ns_client.get("salesOrder", internal_id=sales_order_id)
            messages.append(ShipmentMessageMapper(fulfillment, sales_orders.get(sales_order_id)).to_message())

        return messages, next_watermark(fulfillment.get("lastModifiedDate") for fulfillment in fulfillments)
