from netsuite_endpoint.mapper.base_mapper import BaseMapper

NOT_AVAILABLE = "N/A"


class CustomerSchemaMapper(BaseMapper):
    """A class responsible for mapping a storefront order's customer to a NetSuite customer"""

    def to_netsuite(self) -> dict:
        """Transforms the order into a NetSuite customer keyed by email."""
        order = self.record
        address = order.shipping_address

        payload = {
            "externalId": order.email,
            "email": order.email,
            "firstName": (address and address.firstname) or NOT_AVAILABLE,
            "lastName": (address and address.lastname) or NOT_AVAILABLE,
            "isPerson": True,
            **self._map_addressbook(),
        }

        return payload

    def _map_addressbook(self):
        address = self.record.shipping_address
        if address is None or not (address.address1 or "").strip():
            return {}
        return {"addressbookList": {"addressbook": [self._map_addressbook_entry(address)]}}

    def to_addressbook_update(self, customer: dict) -> dict:
        return {"internalId": customer["internalId"], **self._map_addressbook()}

    def has_changed_address(self, existing_entries) -> bool:
        """True when the shipping address matches none of the customer's address book entries."""
        address = self.record.shipping_address
        if address is None:
            return False
        current = self.address_key(self._map_addressbook_entry(address))
        return all(self.address_key(entry) != current for entry in existing_entries)

    def to_default_address_update(self, customer: dict, existing_entries) -> dict:
        """Customer update that makes the shipping address the default one, keeping the others."""
        entries = [self._map_addressbook_entry(self.record.shipping_address)]
        for entry in existing_entries:
            kept = {field: entry.get(field) for field in ("internalId",) + self.ADDRESS_KEY_FIELDS}
            kept["defaultShipping"] = False
            entries.append(self._compact(kept))

        return {
            "internalId": customer["internalId"],
            "addressbookList": {"addressbook": entries, "replaceAll": True}
        }
