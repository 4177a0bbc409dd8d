from netsuite_endpoint.client import NetSuiteBaseSink
from netsuite_endpoint.mapper.customer_schema_mapper import CustomerSchemaMapper


class CustomerSink(NetSuiteBaseSink):
    record_type = "customer"

    def find(self, email):
        return self.ns_client.get(self.record_type, external_id=email)

    def resolve(self, order) -> dict:
        """Finds or creates the customer of `order` and returns a reference keyed by email."""
        mapper = CustomerSchemaMapper(order)
        customer = self.find(order.email)

        if customer is None:
            self.logger.info(f"Creating customer {order.email}")
            self.ns_client.add(self.record_type, mapper.to_netsuite())
        else:
            self._reconcile_addressbook(customer, mapper)

        return {"externalId": order.email}

    def _reconcile_addressbook(self, customer, mapper):
        address = mapper.record.shipping_address
        if address is None or not (address.address1 or "").strip():
            return

        entries = (customer.get("addressbookList") or {}).get("addressbook") or []
        if not entries:
            self.logger.info(f"Adding default shipping address to customer {customer.get('externalId')}")
            self.ns_client.update(self.record_type, mapper.to_addressbook_update(customer))
        elif mapper.has_changed_address(entries):
            self.logger.info(f"Shipping address changed for customer {customer.get('externalId')}")
            self.ns_client.update(self.record_type, mapper.to_default_address_update(customer, entries))
