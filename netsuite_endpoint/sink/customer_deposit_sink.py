from netsuite_endpoint.client import NetSuiteBaseSink
from netsuite_endpoint.mapper.customer_deposit_schema_mapper import CustomerDepositSchemaMapper


class CustomerDepositSink(NetSuiteBaseSink):
    record_type = "customerDeposit"

    @staticmethod
    def is_paid(order) -> bool:
        return order.paid

    def find(self, number):
        return self.ns_client.get(self.record_type, external_id=number)

    def create(self, order, sales_order):
        """Deposits the order total against `sales_order`.

        Returns the new deposit reference, or None when the order already has one.
        """
        if self.find(order.number) is not None:
            self.logger.info(f"Customer deposit for order {order.number} already exists")
            return None

        payload = CustomerDepositSchemaMapper(order, self.reference, sales_order).to_netsuite()
        return self.ns_client.add(self.record_type, payload)
