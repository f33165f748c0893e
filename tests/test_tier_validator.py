"""
Tests for status tier configuration validation.
"""
from dataclasses import replace
from decimal import Decimal
from hypothesis import given, strategies as st, settings

from apps.commitment.engine import StatusTier, TierConfigValidator
from apps.commitment.engine.validation import (
    INVALID_MULTIPLIER, INVALID_RANGE, LADDER_FLOOR, MULTIPLIER_REGRESSION,
    NEGATIVE_MINIMUM, RANGE_GAP, RANGE_OVERLAP, UNBOUNDED_COUNT
)

SILVER = StatusTier('silver', 'Silver', Decimal('100'), Decimal('500'), Decimal('1.5'), sort_order=2)


def tier(key, minimum, maximum, multiplier='1', sort_order=0, **kwargs):
    return StatusTier(key, key.title(), Decimal(minimum),
                      None if maximum is None else Decimal(maximum),
                      Decimal(multiplier), sort_order=sort_order, **kwargs)


def codes(errors):
    return [error.code for error in errors]


@st.composite
def bounded_tiers(draw, key):
    minimum = draw(st.integers(min_value=0, max_value=10000))
    length = draw(st.integers(min_value=1, max_value=10000))
    return tier(key, minimum, minimum + length)


class TestTierConfigValidator:

    def setup_method(self):
        self.validator = TierConfigValidator()

    def test_overlap_names_conflicting_tier(self):
        candidate = tier('gold', 400, 600, '2')
        errors = self.validator.validate(candidate, [SILVER])
        assert len(errors) == 1
        assert errors[0].code == RANGE_OVERLAP
        assert errors[0].conflicting_tier_key == 'silver'
        assert 'Silver' in errors[0].message
        assert str(errors[0]) == 'Range overlaps with Silver (100 - 500)'

    def test_touching_ranges_are_valid(self):
        candidate = tier('gold', 500, None, '2')
        assert self.validator.validate(candidate, [SILVER]) == []

    def test_min_not_below_max(self):
        errors = self.validator.validate(tier('gold', 600, 600), [])
        assert codes(errors) == [INVALID_RANGE]
        assert errors[0].message == 'Minimum NCTR must be less than maximum NCTR'

    def test_inverted_range_still_checks_overlap(self):
        errors = self.validator.validate(tier('gold', 400, 300), [SILVER])
        assert INVALID_RANGE in codes(errors)
        assert RANGE_OVERLAP in codes(errors)

    def test_negative_minimum(self):
        assert codes(self.validator.validate(tier('bronze', -10, 100), [])) == [NEGATIVE_MINIMUM]

    def test_multiplier_below_one(self):
        errors = self.validator.validate(tier('bronze', 0, 100, '0.5'), [])
        assert codes(errors) == [INVALID_MULTIPLIER]

    def test_all_conflicts_reported(self):
        others = [tier('bronze', 0, 100), SILVER, tier('gold', 500, None, '2')]
        errors = self.validator.validate(tier('new', 50, 600), others)
        assert sorted(error.conflicting_tier_key for error in errors) == ['bronze', 'gold', 'silver']

    def test_unbounded_candidate_overlaps_everything_above(self):
        errors = self.validator.validate(tier('gold', 300, None), [SILVER, tier('platinum', 1000, None)])
        assert sorted(error.conflicting_tier_key for error in errors) == ['platinum', 'silver']

    def test_candidate_is_not_compared_with_itself(self):
        edited = replace(SILVER, max_committed=Decimal('800'))
        assert self.validator.validate(edited, [SILVER]) == []

    def test_inactive_tiers_skipped_by_default(self):
        retired = replace(SILVER, is_active=False)
        candidate = tier('gold', 400, 600)
        assert self.validator.validate(candidate, [retired]) == []
        errors = self.validator.validate(candidate, [retired], include_inactive=True)
        assert codes(errors) == [RANGE_OVERLAP]

    def test_no_others(self):
        assert self.validator.validate(tier('bronze', 0, None), None) == []

    @given(first=bounded_tiers('first'), second=bounded_tiers('second'))
    @settings(max_examples=200)
    def test_overlap_is_symmetric(self, first, second):
        forward = RANGE_OVERLAP in codes(self.validator.validate(first, [second]))
        backward = RANGE_OVERLAP in codes(self.validator.validate(second, [first]))
        assert forward == backward

    @given(minimum=st.integers(min_value=0, max_value=10000),
           first_length=st.integers(min_value=1, max_value=10000),
           second_length=st.integers(min_value=1, max_value=10000))
    @settings(max_examples=100)
    def test_adjacent_ranges_never_overlap(self, minimum, first_length, second_length):
        split = minimum + first_length
        lower = tier('lower', minimum, split)
        upper = tier('upper', split, split + second_length)
        assert self.validator.validate(lower, [upper]) == []
        assert self.validator.validate(upper, [lower]) == []


class TestLadderValidation:

    def setup_method(self):
        self.validator = TierConfigValidator()

    def test_default_ladder_is_clean(self, five_tier_ladder):
        assert self.validator.validate_ladder(five_tier_ladder) == []

    def test_empty_ladder(self):
        assert self.validator.validate_ladder([]) == []

    def test_multiplier_regression(self, ladder):
        tiers = [ladder[0], ladder[1], replace(ladder[2], earning_multiplier=Decimal('1.2'))]
        warnings = self.validator.validate_ladder(tiers)
        assert codes(warnings) == [MULTIPLIER_REGRESSION]
        assert warnings[0].tier_key == 'gold'
        assert 'Gold has lower multiplier' in warnings[0].message

    def test_gap(self, ladder):
        tiers = [ladder[0], ladder[1], replace(ladder[2], min_committed=Decimal('1000'))]
        warnings = self.validator.validate_ladder(tiers)
        assert codes(warnings) == [RANGE_GAP]
        assert warnings[0].message == 'Gap between Silver (ends at 500) and Gold (starts at 1,000)'

    def test_floor_not_zero(self, ladder):
        tiers = [replace(ladder[0], min_committed=Decimal('10'))] + ladder[1:]
        assert codes(self.validator.validate_ladder(tiers)) == [LADDER_FLOOR]

    def test_unbounded_count(self, ladder):
        tiers = ladder[:2] + [replace(ladder[2], max_committed=Decimal('9000'))]
        assert codes(self.validator.validate_ladder(tiers)) == [UNBOUNDED_COUNT]

    def test_overlap_in_ladder(self, ladder):
        tiers = [ladder[0], replace(ladder[1], max_committed=Decimal('700')), ladder[2]]
        warnings = self.validator.validate_ladder(tiers)
        assert codes(warnings) == [RANGE_OVERLAP]
        assert warnings[0].conflicting_tier_key == 'gold'

    def test_inactive_tiers_ignored(self, ladder):
        retired = tier('legacy', 50, 400, '0.5', is_active=False)
        assert self.validator.validate_ladder(ladder + [retired]) == []
