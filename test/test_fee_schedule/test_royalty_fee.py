import pytest

from ledgerfees.core import TokenId
from ledgerfees.core.enums import Denomination, FeeType
from ledgerfees.core.exceptions import StructuralValidationError
from ledgerfees.fee_schedule import FixedFee, Fraction, NetworkRoyaltyFee, RoyaltyFee


class TestRoyaltyFee:

    def test_fee_type(self, royalty_fee):
        assert royalty_fee.fee_type is FeeType.ROYALTY
        assert royalty_fee.has_fallback

    def test_assess(self, royalty_fee):
        assert royalty_fee.assess(1000) == 100
        assert royalty_fee.assess(9) == 0

    def test_fallback_must_be_fixed_fee(self, collector):
        with pytest.raises(StructuralValidationError) as exc_info:
            RoyaltyFee(amount=Fraction(1, 10), collector=collector, fallback_fee={"amount": 5})

        assert exc_info.value.field == "fallback_fee"

    def test_native_fallback(self, royalty_fee):
        network_fee = royalty_fee.to_network_fee()

        assert isinstance(network_fee, NetworkRoyaltyFee)
        assert (network_fee.numerator, network_fee.denominator) == (10, 100)
        assert network_fee.fallback_fee.amount == 5
        assert network_fee.fallback_fee.denomination is Denomination.NATIVE
        assert network_fee.fallback_fee.denominating_token_id is None

    def test_token_fallback_takes_token_branch(self, collector, base_test_data):
        fee = RoyaltyFee(
            amount=Fraction(10, 100),
            collector=collector,
            fallback_fee=FixedFee(amount=5, collector=collector,
                                  denominating_token_id=base_test_data['token_id'])
        )

        fallback = fee.to_network_fee().fallback_fee

        assert fallback.denomination is Denomination.TOKEN
        assert fallback.denominating_token_id == TokenId(0, 0, 500)
        assert fallback.amount == 5

    def test_zero_fallback_is_dropped(self, collector):
        fee = RoyaltyFee(
            amount=Fraction(10, 100),
            collector=collector,
            fallback_fee=FixedFee(amount=0, collector=collector)
        )

        assert not fee.has_fallback
        assert fee.assess_fallback() is None
        assert fee.to_network_fee().fallback_fee is None
        assert "fallback_fee" not in fee.to_network_fee().to_dict()["royalty_fee"]

    def test_no_fallback(self, collector):
        fee = RoyaltyFee(amount=Fraction(1, 20), collector=collector)

        assert fee.to_network_fee().fallback_fee is None

    def test_network_dict(self, royalty_fee):
        assert royalty_fee.to_network_fee().to_dict() == {
            "fee_collector_account_id": "0.0.1001",
            "all_collectors_are_exempt": False,
            "royalty_fee": {
                "exchange_value_fraction": {"numerator": 10, "denominator": 100},
                "fallback_fee": {"amount": 5}
            }
        }

    def test_from_dict_fallback_inherits_collector(self):
        fee = RoyaltyFee.from_dict({
            "amount": {"numerator": 1, "denominator": 10},
            "collector_account_id": "0.0.1001",
            "fallback_fee": {"amount": 3}
        })

        assert fee.fallback_fee.collector == fee.collector
        assert fee.assess_fallback().amount == 3

    def test_from_dict_reports_fallback_field(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            RoyaltyFee.from_dict({
                "amount": {"numerator": 1, "denominator": 10},
                "collector_account_id": "0.0.1001",
                "fallback_fee": {"amount": -3}
            })

        assert exc_info.value.field == "fallback_fee.amount"

    @pytest.mark.parametrize("fallback", [5, "0.0.500", [5]])
    def test_from_dict_non_mapping_fallback(self, fallback):
        with pytest.raises(StructuralValidationError) as exc_info:
            RoyaltyFee.from_dict({
                "amount": {"numerator": 1, "denominator": 10},
                "collector_account_id": "0.0.1001",
                "fallback_fee": fallback
            })

        assert exc_info.value.field == "fallback_fee"

    def test_from_dict_requires_mapping(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            RoyaltyFee.from_dict(["0.0.1001"])

        assert exc_info.value.field == "royalty_fee"
