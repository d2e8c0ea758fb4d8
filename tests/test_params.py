"""Tests for query parameter serialization."""

from datetime import date, datetime
from urllib.parse import parse_qsl

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from seclient.api import params as params_module
from seclient.api.enums import (
    AccountSortBy,
    FilterSiteStatus,
    MeterType,
    SiteSortBy,
    SortOrder,
    SystemUnits,
    TimeUnit,
)
from seclient.api.params import (
    API_KEY_PARAM,
    AccountsListParams,
    DateTimeRangeParams,
    EnvBenefitsParams,
    MetersDateTimeRangeParams,
    QueryParams,
    SensorsDateTimeRangeParams,
    SiteEnergyParams,
    SiteImageParams,
    SitePowerDetailsParams,
    SitesListParams,
    SiteTotalEnergyParams,
    StorageDataParams,
    build_query,
    encode_query,
    format_query_value,
)

START = datetime(2024, 1, 15, 0, 0, 0)
END = datetime(2024, 1, 16, 12, 30, 45)
PRINTABLE = st.text(st.characters(exclude_categories=("Cs", "Cc")), min_size=1)


def _all_param_classes() -> list[type[QueryParams]]:
    return [
        cls
        for cls in vars(params_module).values()
        if isinstance(cls, type) and issubclass(cls, QueryParams) and cls is not QueryParams
    ]


class TestFormatQueryValue:
    """Test format_query_value."""

    def test_enum_uses_wire_token(self):
        """Test enums serialize to their wire token."""
        assert format_query_value(TimeUnit.QUARTER_OF_AN_HOUR) == "QUARTER_OF_AN_HOUR"
        assert format_query_value(SortOrder.ASCENDING) == "ASC"
        assert format_query_value(MeterType.SELF_CONSUMPTION) == "SelfConsumption"

    def test_dates(self):
        """Test dates and datetimes use the API formats."""
        assert format_query_value(date(2024, 1, 5)) == "2024-01-05"
        assert format_query_value(datetime(2024, 1, 5, 7, 8, 9)) == "2024-01-05 07:08:09"

    def test_sequence_is_comma_joined(self):
        """Test sequences join their items with commas."""
        value = (FilterSiteStatus.ACTIVE, FilterSiteStatus.PENDING)
        assert format_query_value(value) == "Active,Pending"

    def test_scalars(self):
        """Test numbers and booleans."""
        assert format_query_value(42) == "42"
        assert format_query_value(True) == "true"


class TestBuildQuery:
    """Test build_query."""

    def test_no_params_sends_only_api_key(self):
        """Test endpoints without parameters still send the key."""
        assert build_query(None, "abc") == "api_key=abc"

    def test_empty_params_sends_only_api_key(self):
        """Test all-optional parameters with nothing set."""
        assert build_query(SitesListParams(), "abc") == "api_key=abc"
        assert build_query(EnvBenefitsParams(), "abc") == "api_key=abc"

    def test_fields_in_declaration_order_then_api_key(self):
        """Test present fields appear in declaration order with the key last."""
        p = SitesListParams(
            size=32,
            sort_order=SortOrder.ASCENDING,
            status=(FilterSiteStatus.ACTIVE, FilterSiteStatus.PENDING),
            search_text="bbb",
        )
        pairs = parse_qsl(build_query(p, "key"))
        assert pairs == [
            ("size", "32"),
            ("searchText", "bbb"),
            ("sortOrder", "ASC"),
            ("status", "Active,Pending"),
            (API_KEY_PARAM, "key"),
        ]

    def test_absent_fields_are_skipped(self):
        """Test that None fields produce no key."""
        p = MetersDateTimeRangeParams(start_time=START, end_time=END)
        keys = [k for k, _ in parse_qsl(build_query(p, "key"))]
        assert keys == ["startTime", "endTime", API_KEY_PARAM]

    @pytest.mark.parametrize(
        "text",
        ["a&b", "x=y", "100%", "two words", "1+1", "a,b", "ü/é?#"],
    )
    def test_reserved_characters_round_trip(self, text):
        """Test values with separator characters decode back unchanged."""
        query = build_query(SitesListParams(search_text=text), "k&e=y")
        assert parse_qsl(query) == [("searchText", text), (API_KEY_PARAM, "k&e=y")]

    @given(text=PRINTABLE, api_key=PRINTABLE)
    def test_arbitrary_values_round_trip(self, text, api_key):
        """Test any printable value parses back to exactly the fields that were set."""
        p = AccountsListParams(search_text=text, sort_order=SortOrder.DESCENDING)
        assert parse_qsl(build_query(p, api_key)) == [
            ("searchText", text),
            ("sortOrder", "DESC"),
            (API_KEY_PARAM, api_key),
        ]

    def test_encoding_has_no_literal_separators(self):
        """Test that separators inside values are percent-encoded."""
        query = encode_query([("searchText", "a&b=c d+e%")])
        assert query == "searchText=a%26b%3Dc%20d%2Be%25"


class TestParamClasses:
    """Test individual parameter classes."""

    def test_site_energy(self):
        """Test date-only params use date format."""
        p = SiteEnergyParams(
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
            time_unit=TimeUnit.DAY,
        )
        assert p.to_query_pairs() == [
            ("startDate", "2024-01-01"),
            ("endDate", "2024-01-31"),
            ("timeUnit", "DAY"),
        ]

    def test_site_total_energy(self):
        """Test total energy params."""
        p = SiteTotalEnergyParams(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))
        assert [k for k, _ in p.to_query_pairs()] == ["startDate", "endDate"]

    def test_date_time_range(self):
        """Test datetime params use the timestamp format."""
        p = DateTimeRangeParams(start_time=START, end_time=END)
        assert p.to_query_pairs() == [
            ("startTime", "2024-01-15 00:00:00"),
            ("endTime", "2024-01-16 12:30:45"),
        ]

    def test_power_details_meters(self):
        """Test meter lists serialize comma-joined."""
        p = SitePowerDetailsParams(
            start_time=START,
            end_time=END,
            meters=(MeterType.PRODUCTION, MeterType.FEED_IN),
        )
        assert p.to_query_pairs()[-1] == ("meters", "Production,FeedIn")

    def test_sensors_use_date_keys_with_timestamps(self):
        """Test sensor params send timestamps under startDate/endDate."""
        p = SensorsDateTimeRangeParams(start_date=START, end_date=END)
        assert p.to_query_pairs() == [
            ("startDate", "2024-01-15 00:00:00"),
            ("endDate", "2024-01-16 12:30:45"),
        ]

    def test_storage_serials(self):
        """Test battery serials serialize comma-joined."""
        p = StorageDataParams(start_time=START, end_time=END, serials=("BAT-1", "BAT-2"))
        assert p.to_query_pairs()[-1] == ("serials", "BAT-1,BAT-2")

    def test_site_image(self):
        """Test image scaling keys."""
        p = SiteImageParams(max_width=640, max_height=480, hash=12345)
        assert p.to_query_pairs() == [
            ("maxWidth", "640"),
            ("maxHeight", "480"),
            ("hash", "12345"),
        ]

    def test_accounts_list_sort(self):
        """Test account sort tokens."""
        p = AccountsListParams(sort_property=AccountSortBy.PHONE)
        assert p.to_query_pairs() == [("sortProperty", "Phone")]

    def test_env_benefits(self):
        """Test unit system token."""
        p = EnvBenefitsParams(system_units=SystemUnits.IMPERIAL)
        assert p.to_query_pairs() == [("systemUnits", "Imperial")]

    def test_camel_case_input_accepted(self):
        """Test params can be built from API key names too."""
        p = SitesListParams(sortProperty=SiteSortBy.PEAK_POWER, startIndex=100)
        assert p.sort_property is SiteSortBy.PEAK_POWER
        assert p.start_index == 100

    def test_size_bounds(self):
        """Test the sites page size is limited to 1..100."""
        with pytest.raises(ValidationError):
            SitesListParams(size=101)
        with pytest.raises(ValidationError):
            SitesListParams(size=0)

    def test_unknown_field_rejected(self):
        """Test misspelled parameters are rejected."""
        with pytest.raises(ValidationError):
            SitesListParams(serach_text="x")

    def test_required_fields(self):
        """Test range params require both ends."""
        with pytest.raises(ValidationError):
            DateTimeRangeParams(start_time=START)

    def test_params_are_immutable(self):
        """Test params are frozen."""
        p = SitesListParams(size=10)
        with pytest.raises(ValidationError):
            p.size = 20


class TestReservedNames:
    """Test the api_key name can never be declared by a parameter class."""

    def test_no_param_class_uses_reserved_name(self):
        """Test every parameter class avoids api_key."""
        classes = _all_param_classes()
        assert len(classes) == 11
        for cls in classes:
            assert API_KEY_PARAM not in cls.query_names(), cls.__name__

    def test_declaring_reserved_name_fails(self):
        """Test a class declaring api_key is rejected at definition time."""
        with pytest.raises(TypeError, match="api_key"):

            class BadParams(QueryParams):
                api_key: str | None = None

    def test_declaring_reserved_alias_fails(self):
        """Test a field aliased to api_key is rejected too."""
        from pydantic import Field

        with pytest.raises(TypeError, match="api_key"):

            class SneakyParams(QueryParams):
                key: str | None = Field(default=None, alias="api_key")
