import pytest

from ledgerfees.core import TokenId
from ledgerfees.core.enums import Denomination, FeeType
from ledgerfees.core.exceptions import StructuralValidationError
from ledgerfees.fee_schedule import FeeCollector, FixedFee, NetworkFixedFee


class TestFixedFee:

    def test_native_fee(self, fixed_fee):
        assert fixed_fee.fee_type is FeeType.FIXED
        assert fixed_fee.is_native
        assert fixed_fee.denominating_token_id is None

    def test_zero_amount_allowed(self, collector):
        assert FixedFee(amount=0, collector=collector).amount == 0

    def test_negative_amount_rejected(self, collector):
        with pytest.raises(StructuralValidationError) as exc_info:
            FixedFee(amount=-1, collector=collector)

        assert exc_info.value.field == "amount"
        assert exc_info.value.bound == ">= 0"

    def test_non_integer_amount_rejected(self, collector):
        with pytest.raises(StructuralValidationError):
            FixedFee(amount=1.5, collector=collector)

    def test_collector_required(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            FixedFee(amount=1, collector="0.0.1001")

        assert exc_info.value.field == "collector"

    def test_token_id_parsed(self, token_fixed_fee):
        assert token_fixed_fee.denominating_token_id == TokenId(0, 0, 500)
        assert not token_fixed_fee.is_native

    def test_empty_token_id_means_native(self, collector):
        assert FixedFee(amount=1, collector=collector, denominating_token_id="").is_native

    def test_malformed_token_id_rejected(self, collector):
        with pytest.raises(StructuralValidationError) as exc_info:
            FixedFee(amount=1, collector=collector, denominating_token_id="token")

        assert exc_info.value.field == "denominating_token_id"

    def test_native_network_fee(self, collector):
        fee = FixedFee(amount=100, collector=FeeCollector.of("0.0.1001", True))

        network_fee = fee.to_network_fee()

        assert isinstance(network_fee, NetworkFixedFee)
        assert network_fee.denomination is Denomination.NATIVE
        assert network_fee.amount == 100
        assert str(network_fee.fee_collector_account_id) == "0.0.1001"
        assert network_fee.all_collectors_are_exempt is True

    def test_token_network_fee(self, token_fixed_fee):
        network_fee = token_fixed_fee.to_network_fee()

        assert network_fee.is_token_denominated
        assert network_fee.denominating_token_id == TokenId(0, 0, 500)
        assert network_fee.to_dict()["fixed_fee"] == {"amount": 25, "denominating_token_id": "0.0.500"}

    def test_from_dict(self):
        fee = FixedFee.from_dict({
            "amount": 10,
            "collector_account_id": "0.0.1001",
            "denominating_token_id": "0.0.500"
        })

        assert fee.amount == 10
        assert fee.to_dict() == {
            "amount": 10,
            "denominating_token_id": "0.0.500",
            "collector_account_id": "0.0.1001",
            "all_collectors_are_exempt": False
        }

    def test_from_dict_inherits_default_collector(self, collector):
        fee = FixedFee.from_dict({"amount": 10}, default_collector=collector)

        assert fee.collector is collector

    def test_from_dict_requires_mapping(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            FixedFee.from_dict(5)

        assert exc_info.value.field == "fixed_fee"
