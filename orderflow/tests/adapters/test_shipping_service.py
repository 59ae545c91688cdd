"""Unit tests for ShippingService and AddressValidator."""

import pytest

from orderflow.adapters.shipping import ShippingService
from orderflow.adapters.validation import AddressValidator
from orderflow.core.errors import InvalidAddressError
from orderflow.core.models import ShippingResult
from orderflow.tests.factories import OrderFactory
from orderflow.tests.fakes import FakeAddressValidatorPort


class TestAddressValidator:
    def test_accepts_address(self) -> None:
        assert AddressValidator().validate_address("221B Baker Street") is True

    @pytest.mark.parametrize("address", [None, "", "   \n"])
    def test_rejects_blank_address(self, address) -> None:
        with pytest.raises(InvalidAddressError, match="address is invalid"):
            AddressValidator().validate_address(address)


class TestShippingService:
    def test_ships_order_with_valid_address(self) -> None:
        validator = FakeAddressValidatorPort()
        order = OrderFactory.build(shipping_address="1 Main St")

        result = ShippingService(validator).ship(order)

        assert result == ShippingResult(success=True)
        assert validator.validated == ["1 Main St"]

    def test_invalid_address_propagates(self) -> None:
        service = ShippingService(FakeAddressValidatorPort(accept=False))

        with pytest.raises(InvalidAddressError):
            service.ship(OrderFactory.build())

    def test_real_validator_rejects_order_without_address(self) -> None:
        service = ShippingService(AddressValidator())

        with pytest.raises(InvalidAddressError):
            service.ship(OrderFactory.build(without_address=True))

    def test_carrier_name_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        service = ShippingService(AddressValidator(), carrier="pigeon-post")

        with caplog.at_level("INFO", logger="orderflow.adapters.shipping"):
            service.ship(OrderFactory.build(order_id="order-9"))

        assert "pigeon-post" in caplog.text
        assert "order-9" in caplog.text
