from netsuite_endpoint.mapper.base_mapper import BaseMapper


class SalesOrderLineItemSchemaMapper(BaseMapper):
    def to_netsuite(self) -> dict:
        line_item = self.record
        # NetSuite may apply tax rates on its own, which would make the order
        # total differ from the storefront one
        return {
            "item": {"internalId": self.reference.inventory_item_id(line_item.sku)},
            "quantity": line_item.quantity,
            "amount": round(line_item.quantity * line_item.price, 2),
            "taxRate1": 0
        }
