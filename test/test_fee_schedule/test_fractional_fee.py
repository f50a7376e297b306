import pytest

from ledgerfees.core.enums import FeeAssessmentMethod, FeeType
from ledgerfees.core.exceptions import StructuralValidationError
from ledgerfees.fee_schedule import Fraction, FractionalFee, NetworkFractionalFee


class TestFractionalFee:

    def create_fee(self, collector, **kwargs):
        defaults = {
            'amount': Fraction(5, 100),
            'minimum': 1,
            'maximum': 100,
            'net_of_transfers': False,
            'collector': collector
        }
        defaults.update(kwargs)
        return FractionalFee(**defaults)

    def test_fee_type(self, fractional_fee):
        assert fractional_fee.fee_type is FeeType.FRACTIONAL
        assert fractional_fee.is_capped

    def test_maximum_below_minimum_rejected(self, collector):
        with pytest.raises(StructuralValidationError) as exc_info:
            self.create_fee(collector, minimum=10, maximum=5)

        assert exc_info.value.field == "maximum"
        assert exc_info.value.bound == ">= 10"

    def test_equal_bounds_allowed(self, collector):
        fee = self.create_fee(collector, minimum=10, maximum=10)

        assert fee.assess(1_000_000) == 10

    def test_zero_maximum_means_uncapped(self, collector):
        fee = self.create_fee(collector, minimum=10, maximum=0)

        assert not fee.is_capped
        assert fee.assess(1_000_000) == 50_000

    def test_negative_minimum_rejected(self, collector):
        with pytest.raises(StructuralValidationError) as exc_info:
            self.create_fee(collector, minimum=-1)

        assert exc_info.value.field == "minimum"

    def test_amount_must_be_fraction(self, collector):
        with pytest.raises(StructuralValidationError) as exc_info:
            self.create_fee(collector, amount=0.05)

        assert exc_info.value.field == "amount"

    def test_net_of_transfers_must_be_bool(self, collector):
        with pytest.raises(StructuralValidationError):
            self.create_fee(collector, net_of_transfers=1)

    @pytest.mark.parametrize("transfer_amount, expected", [
        (1000, 50),
        (10, 1),
        (0, 1),
        (1_000_000, 100),
        (39, 1),
        (59, 2),
    ])
    def test_assess_clamps_to_bounds(self, fractional_fee, transfer_amount, expected):
        assert fractional_fee.assess(transfer_amount) == expected

    def test_assess_rejects_negative_transfer(self, fractional_fee):
        with pytest.raises(StructuralValidationError):
            fractional_fee.assess(-1)

    def test_assessment_method(self, collector):
        assert self.create_fee(collector).assessment_method is FeeAssessmentMethod.INCLUSIVE
        assert self.create_fee(collector, net_of_transfers=True).assessment_method is FeeAssessmentMethod.EXCLUSIVE

    def test_network_fee(self, collector):
        network_fee = self.create_fee(collector, net_of_transfers=True).to_network_fee()

        assert isinstance(network_fee, NetworkFractionalFee)
        assert (network_fee.numerator, network_fee.denominator) == (5, 100)
        assert (network_fee.minimum_amount, network_fee.maximum_amount) == (1, 100)
        assert network_fee.net_of_transfers is True
        assert network_fee.to_dict() == {
            "fee_collector_account_id": "0.0.1001",
            "all_collectors_are_exempt": False,
            "fractional_fee": {
                "fractional_amount": {"numerator": 5, "denominator": 100},
                "minimum_amount": 1,
                "maximum_amount": 100,
                "net_of_transfers": True
            }
        }

    def test_from_dict(self, fractional_fee):
        assert FractionalFee.from_dict(fractional_fee.to_dict()) == fractional_fee

    def test_from_dict_missing_amount_uses_zero_rate(self):
        fee = FractionalFee.from_dict({"collector_account_id": "0.0.1001"})

        assert fee.amount == Fraction(0, 1)
        assert fee.assess(1000) == 0

    def test_from_dict_requires_mapping(self):
        with pytest.raises(StructuralValidationError) as exc_info:
            FractionalFee.from_dict("5/100")

        assert exc_info.value.field == "fractional_fee"

    def test_zero_maximum_accepts_any_minimum(self, collector):
        fee = self.create_fee(collector, minimum=5, maximum=0)

        assert fee.assess(0) == 5
        assert fee.to_network_fee().maximum_amount == 0
