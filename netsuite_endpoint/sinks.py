"""Order lifecycle coordinator: dispatches parsed events to the sinks."""

import logging

import pendulum

from netsuite_endpoint.mapper.reference_mapper import ReferenceMapper
from netsuite_endpoint.schemas import EndpointResponse
from netsuite_endpoint.sink.customer_deposit_sink import CustomerDepositSink
from netsuite_endpoint.sink.customer_sink import CustomerSink
from netsuite_endpoint.sink.item_sink import ItemSink
from netsuite_endpoint.sink.refund_sink import RefundSink
from netsuite_endpoint.sink.sales_order_sink import SalesOrderSink
from netsuite_endpoint.sink.shipment_sink import ShipmentSink

LOGGER = logging.getLogger(__name__)

PRODUCTS_WATERMARK = "netsuite.last_updated_after"
FULFILLMENTS_WATERMARK = "netsuite.last_fulfillments_updated_after"
DEFAULT_LOOKBACK_DAYS = 1


class NetSuiteEndpointSink:
    """Handles one event at a time against a shared NetSuite record client."""

    def __init__(self, config, ns_client) -> None:
        self.config = config
        self.ns_client = ns_client

    def process_event(self, event) -> EndpointResponse:
        LOGGER.info(f"Processing {event.kind} event")
        reference = ReferenceMapper(self.config, self.ns_client)
        response = EndpointResponse()
        handler = getattr(self, f"process_{event.kind}")
        handler(event, reference, response)
        return response

    def _sink(self, sink_class, reference):
        return sink_class(self.config, self.ns_client, reference)

    def process_add_order(self, event, reference, response):
        self.create_or_update_order(event.order, reference, response)

    def process_update_order(self, event, reference, response):
        self.create_or_update_order(event.order, reference, response)

    def create_or_update_order(self, order, reference, response):
        sales_orders = self._sink(SalesOrderSink, reference)
        deposits = self._sink(CustomerDepositSink, reference)

        sales_order = sales_orders.find(order.number)
        paid = deposits.is_paid(order)

        if sales_order is None:
            reference.check_order_mappings(order, paid)
            customer_ref = self._sink(CustomerSink, reference).resolve(order)
            sales_order = sales_orders.build_and_submit(order, customer_ref)
            if paid:
                deposits.create(order, sales_order)
            response.summary = f"Order {sales_order.get('externalId')} sent to NetSuite # {sales_order.get('tranId')}"
        elif paid:
            if deposits.create(order, sales_order) is not None:
                response.summary = f"Customer Deposit created for NetSuite Sales Order {sales_order.get('externalId')}"
        else:
            LOGGER.info(f"Order {order.number} already imported and not paid")

    def process_cancel_order(self, event, reference, response):
        number = event.order.number
        sales_orders = self._sink(SalesOrderSink, reference)
        sales_order = sales_orders.get_sales_order(number)

        if not event.money_taken:
            sales_orders.close(sales_order)
            response.summary = f"NetSuite Sales Order {number} was closed"
        else:
            self._sink(RefundSink, reference).process(event, sales_order)
            response.summary = f"Customer Refund created and NetSuite Sales Order {number} was closed"

    def process_shipment(self, event, reference, response):
        sales_order = self._sink(ShipmentSink, reference).push(event.shipment)
        response.summary = f"Order {sales_order.get('externalId')} fulfilled in NetSuite # {sales_order.get('tranId')}"

    def process_inventory_stock(self, event, reference, response):
        stock = self._sink(ItemSink, reference).stock(event.sku)
        if stock is None:
            return
        response.add_messages("stock:actual", [stock])
        response.add_notification(
            "info", f"{stock['quantity']} units available of {stock['sku']} according to NetSuite"
        )

    def process_products(self, event, reference, response):
        since = self._watermark(event.last_updated_after, PRODUCTS_WATERMARK)
        messages, watermark = self._sink(ItemSink, reference).products(since)
        if messages:
            response.add_messages("product:import", messages)
            response.parameters[PRODUCTS_WATERMARK] = watermark
            response.add_notification("info", f"{len(messages)} items found in NetSuite")

    def process_get_shipments(self, event, reference, response):
        since = self._watermark(event.last_updated_after, FULFILLMENTS_WATERMARK)
        messages, watermark = self._sink(ShipmentSink, reference).pull(since)
        if messages:
            response.add_messages("shipment:confirm", messages)
            response.parameters[FULFILLMENTS_WATERMARK] = watermark
            response.add_notification("info", f"{len(messages)} shipments found in NetSuite")

    def _watermark(self, requested, config_key):
        return (
            requested
            or self.config.get(config_key)
            or pendulum.now("UTC").subtract(days=DEFAULT_LOOKBACK_DAYS).to_iso8601_string()
        )
