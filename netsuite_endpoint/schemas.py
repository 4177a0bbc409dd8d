"""
Pydantic models for storefront webhook payloads and endpoint responses.

Webhook bodies are loosely typed. Each endpoint parses its body into one of
the event models below so the sinks work on explicit structures instead of
probing dictionaries field by field.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from netsuite_endpoint.exceptions import InvalidPayloadError

CANCELED_STATES = ("canceled", "cancelled")
BALANCE_DUE = "balance_due"
COMPLETED = "completed"


class StorefrontModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class Address(StorefrontModel):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    zipcode: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("zipcode", "phone", mode="before")
    @classmethod
    def coerce_to_string(cls, value):
        if value is None:
            return value
        return str(value)

    @property
    def addressee(self) -> str:
        return " ".join(part for part in (self.firstname, self.lastname) if part)


class LineItem(StorefrontModel):
    sku: str
    quantity: int = Field(ge=0)
    price: float = Field(ge=0)


class Totals(StorefrontModel):
    order: float = Field(default=0, ge=0)
    tax: float = Field(default=0, ge=0)
    discount: float = Field(default=0, ge=0)
    shipping: float = Field(default=0, ge=0)

    @field_validator("order", "tax", "discount", "shipping", mode="before")
    @classmethod
    def absolute_value(cls, value):
        # discounts may arrive signed
        if value is None:
            return 0
        return abs(float(value))


class Payment(StorefrontModel):
    payment_method: Optional[str] = None
    status: Optional[str] = None
    amount: Optional[float] = None


class ShipmentLine(StorefrontModel):
    shipping_method: Optional[str] = None


class Original(StorefrontModel):
    payment_state: Optional[str] = None


class Order(StorefrontModel):
    number: str
    email: str
    status: Optional[str] = None
    payment_state: Optional[str] = None
    placed_on: Optional[str] = None
    line_items: List[LineItem] = []
    totals: Totals = Totals()
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    payments: List[Payment] = []
    shipments: List[ShipmentLine] = []

    @property
    def shipping_method(self) -> Optional[str]:
        if self.shipments:
            return self.shipments[0].shipping_method
        return None

    @property
    def payment_method(self) -> Optional[str]:
        if self.payments:
            return self.payments[0].payment_method
        return None

    @property
    def paid(self) -> bool:
        """All payments completed. An order without payments has not been paid."""
        return bool(self.payments) and all(payment.status == COMPLETED for payment in self.payments)


class Shipment(StorefrontModel):
    order_number: Optional[str] = None
    order_id: Optional[str] = None
    shipping_address: Optional[Address] = None

    @model_validator(mode="after")
    def require_order_reference(self):
        if not (self.order_number or self.order_id):
            raise ValueError("shipment needs an order_number or order_id")
        return self

    @property
    def order_external_id(self) -> Optional[str]:
        return self.order_number or self.order_id


class AddOrder(BaseModel):
    kind: Literal["add_order"] = "add_order"
    order: Order


class UpdateOrder(BaseModel):
    kind: Literal["update_order"] = "update_order"
    order: Order


class CancelOrder(BaseModel):
    kind: Literal["cancel_order"] = "cancel_order"
    order: Order
    original: Original = Original()

    @property
    def payment_state(self) -> Optional[str]:
        return self.original.payment_state or self.order.payment_state

    @property
    def money_taken(self) -> bool:
        return self.payment_state != BALANCE_DUE


class ShipmentEvent(BaseModel):
    kind: Literal["shipment"] = "shipment"
    shipment: Shipment


class InventoryQuery(BaseModel):
    kind: Literal["inventory_stock"] = "inventory_stock"
    sku: str


class ProductPull(BaseModel):
    kind: Literal["products"] = "products"
    last_updated_after: Optional[str] = None


class ShipmentPull(BaseModel):
    kind: Literal["get_shipments"] = "get_shipments"
    last_updated_after: Optional[str] = None


Event = Annotated[
    Union[AddOrder, UpdateOrder, CancelOrder, ShipmentEvent, InventoryQuery, ProductPull, ShipmentPull],
    Field(discriminator="kind")
]


class EventEnvelope(BaseModel):
    event: Event


def is_cancellation(body: Dict[str, Any]) -> bool:
    if body.get("cancel") is True:
        return True
    if str(body.get("status") or "").lower() in CANCELED_STATES:
        return True
    order = body.get("order")
    return isinstance(order, dict) and str(order.get("status") or "").lower() in CANCELED_STATES


def parse_event(kind: str, body: Optional[Dict[str, Any]]):
    """Validate a webhook body into the event model for `kind`.

    `update_order` bodies resolve to `CancelOrder` when they carry a
    cancellation marker.
    """
    if body is not None and not isinstance(body, dict):
        raise InvalidPayloadError(f"Invalid {kind} payload: expected a JSON object")
    body = dict(body or {})
    parameters = body.pop("parameters", None) or {}

    if kind == "update_order" and is_cancellation(body):
        kind = "cancel_order"
    if kind == "shipments":
        kind = "shipment"
    if kind == "products":
        body.setdefault("last_updated_after", parameters.get("netsuite.last_updated_after"))
    if kind == "get_shipments":
        body.setdefault("last_updated_after", parameters.get("netsuite.last_fulfillments_updated_after"))
    if kind == "inventory_stock" and "sku" not in body and isinstance(body.get("stock"), dict):
        body["sku"] = body["stock"].get("sku")

    try:
        return EventEnvelope.model_validate({"event": {**body, "kind": kind}}).event
    except ValidationError as exc:
        raise InvalidPayloadError(f"Invalid {kind} payload: {exc}") from exc


class Notification(BaseModel):
    level: str
    subject: str
    description: Optional[str] = None


class EndpointResponse(BaseModel):
    request_id: Optional[str] = None
    summary: Optional[str] = None
    notifications: List[Notification] = []
    messages: List[Dict[str, Any]] = []
    parameters: Dict[str, Any] = {}

    def add_notification(self, level, subject, description=None):
        self.notifications.append(Notification(level=level, subject=subject, description=description))

    def add_messages(self, message_type, payloads):
        self.messages.extend({"type": message_type, "payload": payload} for payload in payloads)
