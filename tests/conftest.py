import copy
import itertools

import pytest

from netsuite_endpoint.exceptions import NetSuiteValidationError

PENDING_FULFILLMENT = "Pending Fulfillment"
PENDING_BILLING = "Pending Billing"
BILLED = "Billed"
CLOSED = "Closed"


class FakeNetSuiteClient:
    """In-memory stand-in for `NetSuiteClient`.

    Mimics the server side behaviour the endpoint relies on: internal ids and
    tran ids are assigned on add, external ids are unique per record type and
    sales order status follows fulfillments, invoices and closed lines.
    """

    def __init__(self):
        self.records = {}
        self.calls = []
        self.fulfillments = []
        self._ids = itertools.count(1000)

    @property
    def writes(self):
        return [(op, record_type) for op, record_type, _ in self.calls if op in ("add", "update")]

    def all(self, record_type):
        return self.records.get(record_type, [])

    def seed(self, record_type, record):
        record = dict(record)
        record.setdefault("internalId", str(next(self._ids)))
        self.records.setdefault(record_type, []).append(record)
        return record

    def _find(self, record_type, internal_id=None, external_id=None):
        for record in self.all(record_type):
            if internal_id is not None and record.get("internalId") == str(internal_id):
                return record
            if external_id is not None and record.get("externalId") == external_id:
                return record
        return None

    def get(self, record_type, internal_id=None, external_id=None):
        self.calls.append(("get", record_type, {"internalId": internal_id, "externalId": external_id}))
        record = self._find(record_type, internal_id, external_id)
        return copy.deepcopy(record)

    def add(self, record_type, record):
        self.calls.append(("add", record_type, copy.deepcopy(record)))
        external_id = record.get("externalId")
        if external_id is not None and self._find(record_type, external_id=external_id):
            raise NetSuiteValidationError(f"A {record_type} with externalId {external_id} already exists")

        stored = self.seed(record_type, copy.deepcopy(record))
        if record_type == "salesOrder":
            stored["tranId"] = f"SO{stored['internalId']}"
            stored["status"] = PENDING_FULFILLMENT
            for line, item in enumerate(stored.get("itemList", {}).get("item", []), start=1):
                item["line"] = line
        elif record_type == "itemFulfillment":
            self._set_status(record["createdFrom"]["internalId"], PENDING_BILLING)
        elif record_type == "invoice":
            self._set_status(record["createdFrom"]["internalId"], BILLED)

        return {"internalId": stored["internalId"], "externalId": external_id, "type": record_type}

    def update(self, record_type, record):
        self.calls.append(("update", record_type, copy.deepcopy(record)))
        stored = self._find(record_type, internal_id=record["internalId"])
        if stored is None:
            raise NetSuiteValidationError(f"{record_type} {record['internalId']} does not exist")

        for field, value in record.items():
            if field == "itemList" and value.get("replaceAll") is False:
                lines = {line["line"]: line for line in stored["itemList"]["item"]}
                for line in value["item"]:
                    lines[line["line"]].update({k: v for k, v in line.items() if k != "line"})
                if all(line.get("isClosed") for line in stored["itemList"]["item"]):
                    stored["status"] = CLOSED
            else:
                stored[field] = copy.deepcopy(value)

        return {"internalId": stored["internalId"], "type": record_type}

    def find_item(self, item_id, item_types=("_inventoryItem",)):
        self.calls.append(("find_item", item_id, tuple(item_types)))
        for record_type in ("inventoryItem", "nonInventorySaleItem"):
            for item in self.all(record_type):
                if item.get("itemId") == item_id and self._item_type(record_type) in item_types:
                    return copy.deepcopy(item)
        return None

    def items_modified_after(self, since, item_types=("_inventoryItem",)):
        self.calls.append(("items_modified_after", since, tuple(item_types)))
        return [copy.deepcopy(item) for item in self.all("inventoryItem") if item.get("lastModifiedDate")]

    def transactions_modified_after(self, transaction_type, since):
        self.calls.append(("transactions_modified_after", transaction_type, since))
        return copy.deepcopy(self.fulfillments)

    @staticmethod
    def _item_type(record_type):
        return "_inventoryItem" if record_type == "inventoryItem" else "_nonInventoryItem"

    def _set_status(self, internal_id, status):
        sales_order = self._find("salesOrder", internal_id=internal_id)
        if sales_order is not None:
            sales_order["status"] = status


@pytest.fixture
def config():
    return {
        "netsuite.email": "ops@example.com",
        "netsuite.password": "secret",
        "netsuite.account": "TSTDRV123",
        "netsuite.shipping_methods_mapping": [{"UPS Ground": "2", "Next Day": "3"}],
        "netsuite.payment_methods_mapping": [{"Credit Card": "5", "Check": "2"}],
    }


@pytest.fixture
def ns_client():
    client = FakeNetSuiteClient()
    client.seed("inventoryItem", {"internalId": "100", "itemId": "A", "displayName": "Widget A"})
    client.seed("inventoryItem", {"internalId": "101", "itemId": "B", "displayName": "Widget B"})
    return client


@pytest.fixture
def address():
    return {
        "firstname": "John",
        "lastname": "Doe",
        "address1": "1 Main St",
        "address2": "Apt 4",
        "zipcode": "10001",
        "city": "New York",
        "state": "New York",
        "country": "US",
        "phone": "(555) 123-4567",
    }


@pytest.fixture
def order_payload(address):
    return {
        "number": "R1001",
        "email": "john@example.com",
        "placed_on": "2014-02-03T17:29:15Z",
        "status": "complete",
        "payment_state": "paid",
        "line_items": [{"sku": "A", "quantity": 2, "price": 10}],
        "totals": {"order": 22, "tax": 2, "discount": 0, "shipping": 5},
        "billing_address": dict(address),
        "shipping_address": dict(address),
        "payments": [{"payment_method": "Credit Card", "status": "completed", "amount": 22}],
        "shipments": [{"shipping_method": "UPS Ground"}],
    }
