"""Tests for API enumerations."""

from enum import Enum

import pytest

from seclient.api import enums

ALL_ENUMS = [
    obj
    for obj in vars(enums).values()
    if isinstance(obj, type) and issubclass(obj, Enum) and obj.__module__ == enums.__name__
]


class TestEnums:
    """Test wire tokens of all enums."""

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS, ids=lambda e: e.__name__)
    def test_tokens_are_unique(self, enum_cls):
        """Test no two members share a wire token."""
        values = [member.value for member in enum_cls]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("member", "token"),
        [
            (enums.SortOrder.ASCENDING, "ASC"),
            (enums.SiteSortBy.PEAK_POWER, "PeakPower"),
            (enums.AccountSortBy.ZIP, "Zip"),
            (enums.SiteStatus.PENDING_COMMUNICATION, "PendingCommunication"),
            (enums.FilterSiteStatus.ALL, "All"),
            (enums.TimeUnit.QUARTER_OF_AN_HOUR, "QUARTER_OF_AN_HOUR"),
            (enums.MeterType.FEED_IN, "FeedIn"),
            (enums.SystemUnits.METRICS, "Metrics"),
            (enums.PowerFlowElement.LOAD, "Load"),
            (enums.InverterMode.LOCKED_INV_ARC_DETECTED, "LOCKED_INV_ARC_DETECTED"),
        ],
    )
    def test_known_tokens(self, member, token):
        """Test members map to the documented tokens."""
        assert member.value == token
        assert type(member)(token) is member

    def test_int_enums(self):
        """Test numeric codes decode to members."""
        assert enums.OperationMode(0) is enums.OperationMode.ON_GRID
        assert enums.BatteryState(3) is enums.BatteryState.ENABLED

    def test_unknown_token_rejected(self):
        """Test closed enums reject unknown tokens."""
        with pytest.raises(ValueError):
            enums.SiteStatus("Archived")
