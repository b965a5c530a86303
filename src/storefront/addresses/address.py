"""Address aggregate: a customer's delivery address, referenced by orders."""

from protean.fields import Boolean, Identifier, String

from storefront.domain import storefront
from storefront.utils.queries import fetch_all


@storefront.aggregate
class Address:
    customer_id = Identifier(required=True)
    name = String(sanitize=False, required=True, max_length=100)
    phone = String(sanitize=False, required=True, max_length=20)
    address_line1 = String(sanitize=False, required=True, max_length=255)
    address_line2 = String(sanitize=False, max_length=255)
    city = String(sanitize=False, required=True, max_length=100)
    state = String(sanitize=False, required=True, max_length=100)
    pincode = String(sanitize=False, required=True, max_length=10)
    is_default = Boolean(default=False)


@storefront.repository(part_of=Address)
class AddressRepository:
    def list_for_customer(self, customer_id: str) -> list[Address]:
        return fetch_all(self._dao.query.filter(customer_id=str(customer_id)))
