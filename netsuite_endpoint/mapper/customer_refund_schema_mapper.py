from netsuite_endpoint.mapper.base_mapper import BaseMapper


class CustomerRefundSchemaMapper(BaseMapper):
    """Maps a cancelled storefront order to a refund of its customer deposit"""

    def __init__(self, record, reference, customer: dict, deposit: dict) -> None:
        super().__init__(record, reference)
        self.customer = customer
        self.deposit = deposit

    def to_netsuite(self) -> dict:
        order = self.record
        return {
            "externalId": order.number,
            "customer": {"internalId": self.customer["internalId"]},
            "paymentMethod": {"internalId": str(self.reference.payment_method_id(order.payment_method))},
            "depositList": {
                "customerRefundDeposit": [
                    self._compact({
                        "doc": int(self.deposit["internalId"]),
                        "apply": True,
                        "amount": self.deposit.get("payment")
                    })
                ]
            }
        }
