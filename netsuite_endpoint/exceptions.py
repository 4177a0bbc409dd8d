from singer_sdk.exceptions import FatalAPIError


class NetSuiteEndpointError(Exception):
    pass

class ConfigurationError(NetSuiteEndpointError):
    pass

class InvalidPayloadError(NetSuiteEndpointError):
    pass

class RecordNotFound(NetSuiteEndpointError):
    """Raised when a record the event depends on is missing from NetSuite."""

    record_name = "record"

    def __init__(self, identifier, message=None) -> None:
        self.identifier = identifier
        super().__init__(message or f"NetSuite {self.record_name} not found for {identifier}")

class RecordNotFoundSalesOrder(RecordNotFound):
    record_name = "Sales Order"

class RecordNotFoundCustomerDeposit(RecordNotFound):
    record_name = "Customer Deposit"

class RecordNotFoundCustomer(RecordNotFound):
    record_name = "Customer"

class RecordNotFoundInventoryItem(RecordNotFound):
    record_name = "Inventory Item"

class NetSuiteValidationError(FatalAPIError):
    """NetSuite rejected a write. Carries the raw status details."""

    def __init__(self, message, details=None) -> None:
        super().__init__(message)
        self.details = details or []

class NetSuiteTransportError(FatalAPIError):
    pass
