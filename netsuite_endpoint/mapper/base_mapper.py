from netsuite_endpoint.mapper.reference_mapper import country_by_iso, state_by_name
from netsuite_endpoint.utils import digits_only


class BaseMapper:
    """A base class responsible for mapping a storefront payload to a payload for NetSuite"""

    # Fields compared when deciding whether two addresses are the same
    ADDRESS_KEY_FIELDS = ("addr1", "addr2", "zip", "city", "state", "country", "phone")

    def __init__(self, record, reference=None) -> None:
        self.record = record
        self.reference = reference

    @staticmethod
    def _compact(payload: dict) -> dict:
        return {key: value for key, value in payload.items() if value is not None}

    def _map_transaction_address(self, address, prefix):
        """Maps a storefront address to the flat `BillAddress`/`ShipAddress` sub-record.

        Args:
            address (Address): storefront address, may be None
            prefix (str): "bill" or "ship"
        """
        if address is None:
            return None

        return self._compact({
            f"{prefix}Addressee": address.addressee,
            f"{prefix}Addr1": address.address1,
            f"{prefix}Addr2": address.address2,
            f"{prefix}Zip": address.zipcode,
            f"{prefix}City": address.city,
            f"{prefix}State": state_by_name(address.state),
            f"{prefix}Country": country_by_iso(address.country),
            f"{prefix}Phone": digits_only(address.phone)
        })

    @staticmethod
    def _map_addressbook_entry(address, default_shipping=True):
        return {
            "defaultShipping": default_shipping,
            "addressee": address.addressee or None,
            "addr1": address.address1,
            "addr2": address.address2,
            "zip": address.zipcode,
            "city": address.city,
            "state": state_by_name(address.state),
            "country": country_by_iso(address.country),
            "phone": digits_only(address.phone)
        }

    @classmethod
    def address_key(cls, entry: dict):
        """Normalised comparison key of an address book entry; `defaultShipping` is ignored."""
        key = []
        for field in cls.ADDRESS_KEY_FIELDS:
            value = entry.get(field)
            key.append(digits_only(value) if field == "phone" else ("" if value is None else str(value)))
        return tuple(key)
