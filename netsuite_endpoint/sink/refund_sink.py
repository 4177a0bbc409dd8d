from netsuite_endpoint.client import NetSuiteBaseSink
from netsuite_endpoint.exceptions import RecordNotFoundCustomer, RecordNotFoundCustomerDeposit
from netsuite_endpoint.mapper.customer_refund_schema_mapper import CustomerRefundSchemaMapper
from netsuite_endpoint.sink.customer_deposit_sink import CustomerDepositSink
from netsuite_endpoint.sink.customer_sink import CustomerSink
from netsuite_endpoint.sink.sales_order_sink import SalesOrderSink


class RefundSink(NetSuiteBaseSink):
    record_type = "customerRefund"

    def find(self, number):
        return self.ns_client.get(self.record_type, external_id=number)

    def process(self, event, sales_order):
        """Refunds the deposit of a cancelled order, then closes its sales order."""
        order = event.order
        sink_args = (self.config, self.ns_client, self.reference)

        deposit = CustomerDepositSink(*sink_args).find(order.number)
        if deposit is None:
            raise RecordNotFoundCustomerDeposit(
                order.number, f"NetSuite Customer Deposit not found for order {order.number}"
            )

        customer = CustomerSink(*sink_args).find(order.email)
        if customer is None:
            raise RecordNotFoundCustomer(order.email, f"NetSuite Customer not found for {order.email}")

        if self.find(order.number) is None:
            payload = CustomerRefundSchemaMapper(order, self.reference, customer, deposit).to_netsuite()
            self.ns_client.add(self.record_type, payload)
        else:
            self.logger.info(f"Customer refund for order {order.number} already exists")

        return SalesOrderSink(*sink_args).close(sales_order)
