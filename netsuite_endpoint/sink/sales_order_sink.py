from netsuite_endpoint.client import NetSuiteBaseSink
from netsuite_endpoint.mapper.sales_order_schema_mapper import SalesOrderSchemaMapper

PENDING_FULFILLMENT = "Pending Fulfillment"
PENDING_BILLING = "Pending Billing"


class SalesOrderSink(NetSuiteBaseSink):
    record_type = "salesOrder"

    def find(self, number):
        return self.find_sales_order(number)

    def build_and_submit(self, order, customer_ref) -> dict:
        """Adds the sales order of `order` and returns it as stored by NetSuite.

        The record is fetched back by external id since `tranId` is assigned on add.
        """
        payload = SalesOrderSchemaMapper(order, self.reference, customer_ref).to_netsuite()
        self.ns_client.add(self.record_type, payload)
        return self.get_sales_order(order.number)

    def close(self, sales_order) -> dict:
        """Closes every line, which moves the order to the Closed status. Nothing is deleted."""
        lines = (sales_order.get("itemList") or {}).get("item") or []
        payload = {
            "internalId": sales_order["internalId"],
            "itemList": {
                "item": [{"line": line.get("line"), "isClosed": True} for line in lines],
                "replaceAll": False
            }
        }
        self.logger.info(f"Closing sales order {sales_order.get('externalId')}")
        return self.ns_client.update(self.record_type, payload)
