import logging

from zeep.helpers import serialize_object

from netsuite_endpoint.exceptions import NetSuiteValidationError

LOGGER = logging.getLogger(__name__)

NOT_FOUND_CODES = ("RCRD_DSNT_EXIST",)


def error_details(status):
    """Status details of type ERROR. NetSuite also reports WARN and INFO details."""
    return [detail for detail in (status.statusDetail or []) if detail.type == "ERROR"]


def format_error_message(details):
    return ", ".join(detail.message for detail in details if detail.message)


class NetSuiteClient:
    """Record level operations over the SOAP transport.

    Records go in and come out as plain dicts keyed by NetSuite field names.
    """

    def __init__(self, soap_client):
        self.soap = soap_client

    @staticmethod
    def record_class_name(record_type):
        return record_type[:1].upper() + record_type[1:]

    def build_record(self, record_type, record: dict):
        return self.soap.type(self.record_class_name(record_type))(**record)

    def get(self, record_type, internal_id=None, external_id=None):
        """Fetches one record, or None when NetSuite reports it does not exist."""
        ref = self.soap.type("RecordRef")(type=record_type, internalId=internal_id, externalId=external_id)
        result = self.soap.request("get", baseRef=ref)

        if not result.status.isSuccess:
            details = result.status.statusDetail or []
            if any(detail.code in NOT_FOUND_CODES for detail in details):
                LOGGER.debug(f"{record_type} not found: internalId={internal_id}, externalId={external_id}")
                return None
            self._raise_for_status(f"get {record_type}", result.status)

        return serialize_object(result.record, dict)

    def add(self, record_type, record: dict):
        result = self.soap.request("add", record=self.build_record(record_type, record))
        self._raise_for_status(f"add {record_type}", result.status)
        base_ref = serialize_object(result.baseRef, dict)
        LOGGER.info(
            f"Created {record_type} internalId: {base_ref.get('internalId')}, externalId: {base_ref.get('externalId')}"
        )
        return base_ref

    def update(self, record_type, record: dict):
        result = self.soap.request("update", record=self.build_record(record_type, record))
        self._raise_for_status(f"update {record_type}", result.status)
        base_ref = serialize_object(result.baseRef, dict)
        LOGGER.info(f"Updated {record_type} internalId: {base_ref.get('internalId')}")
        return base_ref

    def search(self, search_type, **criteria):
        """Runs a basic search and follows every result page."""
        search_record = self.soap.type(search_type)(**criteria)
        result = self.soap.request("search", searchRecord=search_record)
        records = self._records(search_type, result)

        while (result.totalPages or 0) > (result.pageIndex or 0):
            result = self.soap.request("searchMoreWithId", searchId=result.searchId, pageIndex=result.pageIndex + 1)
            records.extend(self._records(search_type, result))

        return records

    def find_item(self, item_id, item_types=("_inventoryItem",)):
        items = self.search(
            "ItemSearchBasic",
            itemId={"searchValue": item_id, "operator": "is"},
            type={"searchValue": list(item_types), "operator": "anyOf"}
        )
        return items[0] if items else None

    def items_modified_after(self, since, item_types=("_inventoryItem",)):
        return self.search(
            "ItemSearchBasic",
            lastModifiedDate={"searchValue": since, "operator": "after"},
            type={"searchValue": list(item_types), "operator": "anyOf"}
        )

    def transactions_modified_after(self, transaction_type, since):
        return self.search(
            "TransactionSearchBasic",
            lastModifiedDate={"searchValue": since, "operator": "after"},
            type={"searchValue": [transaction_type], "operator": "anyOf"}
        )

    def _records(self, search_type, result):
        self._raise_for_status(f"search {search_type}", result.status)
        if result.recordList is None:
            return []
        return serialize_object(result.recordList.record, dict) or []

    def _raise_for_status(self, operation, status):
        details = error_details(status)
        if details or not status.isSuccess:
            message = format_error_message(details or status.statusDetail or []) or f"NetSuite {operation} failed"
            LOGGER.error(f"NetSuite {operation} failed: {message}")
            raise NetSuiteValidationError(message, details)
