"""Address validation adapter."""

import logging

from orderflow.core.errors import InvalidAddressError
from orderflow.core.ports import AddressValidatorPort

logger = logging.getLogger(__name__)


class AddressValidator(AddressValidatorPort):
    """Accepts any non-blank address."""

    def validate_address(self, address: str | None) -> bool:
        if not address or not address.strip():
            logger.warning("Rejected blank shipping address")
            raise InvalidAddressError("address is invalid")
        return True
