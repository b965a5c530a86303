"""Address book: command and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.addresses.address import Address
from storefront.domain import storefront


@storefront.command(part_of="Address")
class AddAddress:
    customer_id = Identifier(required=True)
    name = String(sanitize=False, required=True, max_length=100)
    phone = String(sanitize=False, required=True, max_length=20)
    address_line1 = String(sanitize=False, required=True, max_length=255)
    address_line2 = String(sanitize=False, max_length=255)
    city = String(sanitize=False, required=True, max_length=100)
    state = String(sanitize=False, required=True, max_length=100)
    pincode = String(sanitize=False, required=True, max_length=10)
    is_default = Boolean(default=False)


@storefront.command_handler(part_of=Address)
class AddressBookHandler:
    @handle(AddAddress)
    def add_address(self, command):
        address = Address(
            customer_id=command.customer_id,
            name=command.name,
            phone=command.phone,
            address_line1=command.address_line1,
            address_line2=command.address_line2,
            city=command.city,
            state=command.state,
            pincode=command.pincode,
            is_default=bool(command.is_default),
        )
        current_domain.repository_for(Address).add(address)
        return str(address.id)
