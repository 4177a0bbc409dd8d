import pytest

from netsuite_endpoint.mapper.reference_mapper import ReferenceMapper
from netsuite_endpoint.sink.shipment_sink import ShipmentSink


def fulfillment(internal_id, sales_order_id, modified, **overrides):
    record = {
        "internalId": internal_id,
        "createdFrom": {"internalId": sales_order_id, "name": "Sales Order #SO1"},
        "shippingCost": 5.0,
        "shipStatus": "_shipped",
        "shipMethod": {"internalId": "2", "name": "UPS Ground"},
        "packageList": {"package": [{"packageTrackingNumber": "1Z1"}, {"packageTrackingNumber": "1Z2"}]},
        "tranDate": "2014-02-04T08:00:00Z",
        "lastModifiedDate": modified,
        "transactionShipAddress": {
            "shipAddressee": "John Doe",
            "shipAddr1": "1 Main St",
            "shipAddr2": "Apt 4",
            "shipZip": "10001",
            "shipCity": "New York",
            "shipState": "NY",
            "shipCountry": "_unitedStates",
            "shipPhone": "5551234567",
        },
        "itemList": {"item": [{"item": {"internalId": "100", "name": "A"}, "quantity": 2.0}]},
    }
    record.update(overrides)
    return record


@pytest.fixture
def shipments(config, ns_client):
    return ShipmentSink(config, ns_client, ReferenceMapper(config, ns_client))


class TestShipmentPull:
    def test_messages_and_watermark(self, shipments, ns_client):
        sales_order = ns_client.seed("salesOrder", {"externalId": "R1001", "tranId": "SO1"})
        ns_client.fulfillments = [
            fulfillment("500", sales_order["internalId"], "2014-02-04T09:00:00Z"),
            fulfillment("501", sales_order["internalId"], "2014-02-05T09:30:00Z", packageList=None),
        ]

        messages, watermark = shipments.pull("2014-02-01T00:00:00Z")

        assert watermark == "2014-02-05T09:30:01Z"
        assert messages[0] == {
            "id": "500",
            "order_id": "R1001",
            "cost": 5.0,
            "status": "shipped",
            "shipping_method": "UPS Ground",
            "tracking": "1Z1, 1Z2",
            "shipped_at": "2014-02-04T08:00:00Z",
            "shipping_address": {
                "firstname": "John",
                "lastname": "Doe",
                "address1": "1 Main St",
                "address2": "Apt 4",
                "zipcode": "10001",
                "city": "New York",
                "state": "NY",
                "country": "UnitedStates",
                "phone": "5551234567",
            },
            "items": [{"name": "A", "product_id": "A", "quantity": 2}],
        }
        assert messages[1]["tracking"] == ""

    def test_sales_orders_are_fetched_once_per_pull(self, shipments, ns_client):
        sales_order = ns_client.seed("salesOrder", {"externalId": "R1001"})
        ns_client.fulfillments = [
            fulfillment(str(id), sales_order["internalId"], "2014-02-04T09:00:00Z") for id in range(500, 503)
        ]

        shipments.pull("2014-02-01T00:00:00Z")

        lookups = [call for call in ns_client.calls if call[:2] == ("get", "salesOrder")]
        assert len(lookups) == 1

    def test_fulfillment_without_sales_order(self, shipments, ns_client):
        sales_order = ns_client.seed("salesOrder", {"externalId": "R1001"})
        ns_client.fulfillments = [
            fulfillment("500", None, "2014-02-04T09:00:00Z", createdFrom=None),
            fulfillment("501", sales_order["internalId"], "2014-02-05T09:00:00Z"),
        ]

        messages, watermark = shipments.pull("2014-02-01T00:00:00Z")

        assert [message["order_id"] for message in messages] == [None, "R1001"]
        assert watermark == "2014-02-05T09:00:01Z"
        lookups = [call for call in ns_client.calls if call[:2] == ("get", "salesOrder")]
        assert [call[2]["internalId"] for call in lookups] == [sales_order["internalId"]]

    def test_nothing_to_pull(self, shipments):
        assert shipments.pull("2014-02-01T00:00:00Z") == ([], None)
