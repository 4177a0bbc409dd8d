import pytest

from netsuite_endpoint.exceptions import InvalidPayloadError
from netsuite_endpoint.schemas import (
    AddOrder,
    CancelOrder,
    InventoryQuery,
    ShipmentEvent,
    ShipmentPull,
    UpdateOrder,
    parse_event,
)


class TestParseEvent:
    def test_add_order(self, order_payload):
        event = parse_event("add_order", {"order": order_payload})

        assert isinstance(event, AddOrder)
        assert event.order.totals.order == 22
        assert event.order.paid is True
        assert event.order.shipping_method == "UPS Ground"

    def test_update_order(self, order_payload):
        assert isinstance(parse_event("update_order", {"order": order_payload}), UpdateOrder)

    @pytest.mark.parametrize("marker", [
        {"cancel": True},
        {"status": "canceled"},
        {"status": "Cancelled"},
    ])
    def test_cancellation_markers(self, order_payload, marker):
        event = parse_event("update_order", {"order": order_payload, **marker})

        assert isinstance(event, CancelOrder)

    def test_cancelled_order_status(self, order_payload):
        order_payload["status"] = "canceled"

        assert isinstance(parse_event("update_order", {"order": order_payload}), CancelOrder)

    def test_money_taken(self, order_payload):
        balance_due = parse_event(
            "update_order", {"order": order_payload, "cancel": True, "original": {"payment_state": "balance_due"}}
        )
        order_payload["payment_state"] = "balance_due"
        fallback = parse_event("update_order", {"order": order_payload, "cancel": True})
        paid = parse_event("update_order", {"order": order_payload, "cancel": True, "original": {"payment_state": "paid"}})

        assert balance_due.money_taken is False
        assert fallback.money_taken is False
        assert paid.money_taken is True

    def test_shipment(self):
        event = parse_event("shipments", {"shipment": {"order_id": "R1", "shipping_address": {"zipcode": 10001}}})

        assert isinstance(event, ShipmentEvent)
        assert event.shipment.order_external_id == "R1"
        assert event.shipment.shipping_address.zipcode == "10001"

    def test_shipment_without_order_reference(self):
        with pytest.raises(InvalidPayloadError, match="order_number or order_id"):
            parse_event("shipments", {"shipment": {"shipping_address": {"zipcode": "10001"}}})

    def test_inventory_stock_from_nested_stock(self):
        event = parse_event("inventory_stock", {"stock": {"sku": "A"}})

        assert isinstance(event, InventoryQuery)
        assert event.sku == "A"

    def test_get_shipments_watermark_parameter(self):
        event = parse_event(
            "get_shipments", {"parameters": {"netsuite.last_fulfillments_updated_after": "2014-01-01T00:00:00Z"}}
        )

        assert isinstance(event, ShipmentPull)
        assert event.last_updated_after == "2014-01-01T00:00:00Z"

    def test_invalid_payload(self):
        with pytest.raises(InvalidPayloadError, match="add_order"):
            parse_event("add_order", {"order": {"number": "R1"}})

    def test_non_object_payload(self):
        with pytest.raises(InvalidPayloadError):
            parse_event("add_order", ["R1"])
