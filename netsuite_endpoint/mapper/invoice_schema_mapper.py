from netsuite_endpoint.mapper.base_mapper import BaseMapper


class InvoiceSchemaMapper(BaseMapper):
    """Bills a fulfilled sales order. Taxes already live on the order lines."""

    def to_netsuite(self) -> dict:
        return {
            "createdFrom": {"internalId": self.record["internalId"]},
            "taxRate": 0,
            "isTaxable": False
        }
