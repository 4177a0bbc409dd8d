import logging

from netsuite_endpoint.exceptions import RecordNotFoundSalesOrder


class NetSuiteBaseSink:
    """Shared state of the handlers working on one event.

    `ns_client` is the process wide record client; `reference` is the
    request scoped `ReferenceMapper`.
    """

    record_type = None

    def __init__(self, config, ns_client, reference) -> None:
        self.config = config
        self.ns_client = ns_client
        self.reference = reference
        self.logger = logging.getLogger(type(self).__module__)

    def find_sales_order(self, number):
        return self.ns_client.get("salesOrder", external_id=number)

    def get_sales_order(self, number):
        sales_order = self.find_sales_order(number)
        if sales_order is None:
            raise RecordNotFoundSalesOrder(number, f"NetSuite Sales Order not found for order {number}")
        return sales_order
