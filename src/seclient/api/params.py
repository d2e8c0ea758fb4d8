"""Typed query parameters for SolarEdge API endpoints.

Every parameter class serializes its present fields, in declaration order, to
``key=value`` pairs. Keys are the camelCase names the API documents. Values are
percent-encoded with no safe characters so that ``&``, ``=``, ``%``, ``+``,
spaces and commas inside a value can never be mistaken for separators.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from seclient.api.dates import format_date
from seclient.api.enums import (
    AccountSortBy,
    FilterSiteStatus,
    MeterType,
    SiteSortBy,
    SortOrder,
    SystemUnits,
    TimeUnit,
)

API_KEY_PARAM = "api_key"
RESERVED_QUERY_NAMES = frozenset({API_KEY_PARAM})


def format_query_value(value: Any) -> str:
    """Convert a parameter value to its wire representation.

    Args:
        value: Enum member, date, datetime, bool, number, string or a
            sequence of those.

    Returns:
        The string sent to the API. Enums use their wire token, sequences are
        joined with commas.
    """
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return format_date(value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_query_value(v) for v in value)
    return str(value)


def encode_query(pairs: list[tuple[str, str]]) -> str:
    """Percent-encode key/value pairs into a query string."""
    return "&".join(f"{quote(key, safe='')}={quote(value, safe='')}" for key, value in pairs)


class QueryParams(BaseModel):
    """Base class for endpoint parameters."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        clashes = RESERVED_QUERY_NAMES.intersection([*cls.model_fields, *cls.query_names()])
        if clashes:
            raise TypeError(
                f"{cls.__name__} declares reserved query parameter(s): {', '.join(sorted(clashes))}"
            )

    @classmethod
    def query_names(cls) -> list[str]:
        """Wire names of all fields, in serialization order."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    def to_query_pairs(self) -> list[tuple[str, str]]:
        """Serialize present fields to ``(key, value)`` pairs."""
        pairs = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            pairs.append((field.alias or name, format_query_value(value)))
        return pairs


def build_query(params: QueryParams | None, api_key: str) -> str:
    """Build the full query string for a request.

    Args:
        params: Endpoint parameters, or None for endpoints without any.
        api_key: Account or site API key, always appended last.

    Returns:
        Encoded query string without the leading ``?``.
    """
    pairs = params.to_query_pairs() if params is not None else []
    pairs.append((API_KEY_PARAM, api_key))
    return encode_query(pairs)


class SitesListParams(QueryParams):
    """Filter, sort and page the sites list."""

    size: int | None = Field(default=None, ge=1, le=100)
    start_index: int | None = Field(default=None, ge=0)
    search_text: str | None = None
    sort_property: SiteSortBy | None = None
    sort_order: SortOrder | None = None
    status: tuple[FilterSiteStatus, ...] | None = None


class AccountsListParams(QueryParams):
    """Filter, sort and page the accounts list."""

    size: int | None = Field(default=None, ge=1, le=100)
    start_index: int | None = Field(default=None, ge=0)
    search_text: str | None = None
    sort_property: AccountSortBy | None = None
    sort_order: SortOrder | None = None


class SiteEnergyParams(QueryParams):
    """Date range and granularity for energy measurements.

    The API limits the range to one year for ``DAY`` and to one month for
    ``QUARTER_OF_AN_HOUR`` and ``HOUR``.
    """

    start_date: date
    end_date: date
    time_unit: TimeUnit | None = None


class SiteTotalEnergyParams(QueryParams):
    """Date range for total energy produced."""

    start_date: date
    end_date: date


class DateTimeRangeParams(QueryParams):
    """Time range for power measurements and inverter telemetry."""

    start_time: datetime
    end_time: datetime


class SitePowerDetailsParams(QueryParams):
    """Time range and meter selection for detailed power measurements."""

    start_time: datetime
    end_time: datetime
    meters: tuple[MeterType, ...] | None = None


class MetersDateTimeRangeParams(QueryParams):
    """Time range, granularity and meter selection for meter readings."""

    start_time: datetime
    end_time: datetime
    time_unit: TimeUnit | None = None
    meters: tuple[MeterType, ...] | None = None


class SensorsDateTimeRangeParams(QueryParams):
    """Time range for sensor data (at most one week)."""

    start_date: datetime
    end_date: datetime


class StorageDataParams(QueryParams):
    """Time range and battery selection for storage data (at most one week)."""

    start_time: datetime
    end_time: datetime
    serials: tuple[str, ...] | None = None


class SiteImageParams(QueryParams):
    """Scaling and cache validation for the site image."""

    max_width: int | None = Field(default=None, ge=1)
    max_height: int | None = Field(default=None, ge=1)
    hash: int | None = None


class EnvBenefitsParams(QueryParams):
    """Unit system for environmental benefits (defaults to the user's)."""

    system_units: SystemUnits | None = None
