import pytest

from ledgerfees.core.enums import Denomination, FeeAssessmentMethod
from ledgerfees.core.exceptions import StructuralValidationError
from ledgerfees.core import TokenId
from ledgerfees.fee_schedule import NetworkFixedFee, NetworkFractionalFee, to_network_fee


class TestToNetworkFee:

    def test_dispatch_on_variant(self, fixed_fee, fractional_fee, royalty_fee):
        assert to_network_fee(fixed_fee) == fixed_fee.to_network_fee()
        assert to_network_fee(fractional_fee) == fractional_fee.to_network_fee()
        assert to_network_fee(royalty_fee) == royalty_fee.to_network_fee()

    def test_unsupported_variant(self):
        with pytest.raises(TypeError):
            to_network_fee({"amount": 1})


class TestNetworkFixedFee:

    def test_token_denomination_requires_token(self):
        with pytest.raises(StructuralValidationError):
            NetworkFixedFee(amount=1, denomination=Denomination.TOKEN)

    def test_native_denomination_forbids_token(self):
        with pytest.raises(StructuralValidationError):
            NetworkFixedFee(amount=1, denomination=Denomination.NATIVE,
                            denominating_token_id=TokenId(0, 0, 500))

    def test_fallback_shape_has_no_collector(self):
        fee = NetworkFixedFee.in_native(5)

        assert fee.to_dict() == {
            "fee_collector_account_id": None,
            "all_collectors_are_exempt": False,
            "fixed_fee": {"amount": 5}
        }


class TestNetworkFractionalFee:

    def test_net_of_transfers_from_method(self):
        fee = NetworkFractionalFee(1, 10, 0, 0, FeeAssessmentMethod.INCLUSIVE, TokenId(0, 0, 1))

        assert fee.net_of_transfers is False
