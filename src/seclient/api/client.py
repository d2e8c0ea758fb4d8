"""SolarEdge API client."""

from collections.abc import Iterable
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import quote

import structlog
from pydantic import ConfigDict, Field, TypeAdapter, ValidationError, create_model

from seclient.api.models import (
    Account,
    ApiList,
    CurrentPowerFlow,
    DataPeriod,
    Energy,
    EnergyBulkList,
    EnergyDetails,
    EnvBenefits,
    EquipmentChange,
    Inventory,
    InverterTelemetry,
    Meters,
    Overview,
    Power,
    PowerBulkList,
    PowerDetails,
    Reporter,
    SensorData,
    SensorSummary,
    SiteDataPeriod,
    SiteDetails,
    SiteOverview,
    SiteTimeFrameEnergy,
    StorageBattery,
    TimeFrameEnergy,
    VersionSpec,
)
from seclient.api.params import (
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
)
from seclient.api.transport import HttpTransport
from seclient.config.settings import DEFAULT_BASE_URL, Settings
from seclient.utils.exceptions import ApiError, ConfigurationError, DecodeError, TransportError

logger = structlog.get_logger(__name__)

R = TypeVar("R")


@lru_cache(maxsize=None)
def _envelope(key: str, result_type: Any) -> TypeAdapter[Any]:
    # {"<key>": <result>, ...}; other top-level members are ignored
    model = create_model(
        f"{key[:1].upper()}{key[1:]}Envelope",
        __config__=ConfigDict(strict=True, extra="ignore"),
        result=(result_type, Field(alias=key)),
    )
    return TypeAdapter(model)


def decode_response(endpoint: str, content: bytes, key: str, result_type: type[R]) -> R:
    """Decode a JSON response body into a typed result.

    Args:
        endpoint: Name of the client method, for error context.
        content: Raw response body.
        key: Top-level member of the JSON object holding the result.
        result_type: Model or type the member is validated against.

    Returns:
        The validated result.

    Raises:
        DecodeError: If the body is not JSON, lacks ``key``, or does not
            match ``result_type``. Values of the wrong JSON type are not
            coerced.
    """
    try:
        envelope = _envelope(key, result_type).validate_json(content)
    except ValidationError as e:
        if any(error["type"] == "json_invalid" for error in e.errors()):
            raise DecodeError(f"{endpoint}: response is not valid JSON: {e}", endpoint) from e
        raise DecodeError(f"{endpoint}: unexpected response shape: {e}", endpoint) from e
    return envelope.result


def join_site_ids(site_ids: Iterable[int]) -> str:
    """Join site IDs into the comma-separated path segment of bulk endpoints."""
    ids = [str(int(site_id)) for site_id in site_ids]
    if not ids:
        raise ValueError("At least one site ID is required")
    return ",".join(ids)


class SolarEdgeClient:
    """Async client for the SolarEdge Monitoring API.

    The client only holds its configuration. Requests go through the
    injected transport, so one instance can serve any number of concurrent
    calls.
    """

    def __init__(
        self,
        transport: HttpTransport,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Performs the HTTP requests.
            api_key: SolarEdge API key.
            base_url: API base URL, overridable for testing.

        Raises:
            ConfigurationError: If the API key or base URL is empty.
        """
        if not api_key:
            raise ConfigurationError("API key must not be empty")
        if not base_url:
            raise ConfigurationError("Base URL must not be empty")
        self._transport = transport
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, transport: HttpTransport, settings: Settings) -> "SolarEdgeClient":
        """Create a client from settings.

        Args:
            transport: Performs the HTTP requests.
            settings: Client settings.

        Returns:
            Configured client.
        """
        return cls(
            transport,
            settings.api_key.get_secret_value(),
            base_url=settings.api_base_url,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r}, api_key='<hidden>')"

    @property
    def base_url(self) -> str:
        """API base URL without a trailing slash."""
        return self._base_url

    def _build_url(self, path: str, params: QueryParams | None = None) -> str:
        return f"{self._base_url}{path}?{build_query(params, self._api_key)}"

    async def _request(
        self,
        endpoint: str,
        path: str,
        params: QueryParams | None = None,
    ) -> bytes:
        """Make an API request.

        Args:
            endpoint: Name of the calling method, for logs and errors.
            path: API path.
            params: Query parameters.

        Returns:
            Raw body of a 2xx response.

        Raises:
            TransportError: If the transport fails.
            ApiError: If the response status is not 2xx.
        """
        url = self._build_url(path, params)
        logger.debug("API request", endpoint=endpoint, path=path)

        # CancelledError is not an Exception: cancelling the calling task
        # propagates as-is instead of becoming a TransportError.
        try:
            response = await self._transport.execute("GET", url)
        except Exception as e:
            logger.error("Transport error", endpoint=endpoint, path=path, error=str(e))
            raise TransportError(f"{endpoint}: request failed: {e}", endpoint) from e

        if not 200 <= response.status_code < 300:
            logger.error(
                "API error",
                endpoint=endpoint,
                path=path,
                status_code=response.status_code,
                response=response.content[:500].decode("utf-8", errors="replace"),
            )
            raise ApiError(
                f"{endpoint}: API returned status {response.status_code}",
                endpoint,
                status_code=response.status_code,
                body=response.content,
            )

        logger.debug(
            "API response",
            endpoint=endpoint,
            status_code=response.status_code,
            size=len(response.content),
        )
        return response.content

    async def _fetch(
        self,
        endpoint: str,
        path: str,
        key: str,
        result_type: type[R],
        params: QueryParams | None = None,
    ) -> R:
        content = await self._request(endpoint, path, params)
        try:
            return decode_response(endpoint, content, key, result_type)
        except DecodeError as e:
            logger.error("Decode error", endpoint=endpoint, path=path, error=str(e))
            raise

    # Version endpoints

    async def get_current_version(self) -> str:
        """Get the most recent API version in ``major.minor.revision`` form."""
        version = await self._fetch(
            "get_current_version", "/version/current.json", "version", VersionSpec
        )
        return version.release

    async def get_supported_versions(self) -> list[VersionSpec]:
        """Get all supported API versions."""
        return await self._fetch(
            "get_supported_versions", "/version/supported.json", "supported", list[VersionSpec]
        )

    # Account endpoints

    async def get_accounts(self, params: AccountsListParams | None = None) -> list[Account]:
        """Get the sub-accounts visible to the API key.

        Args:
            params: Paging, search and sort options.

        Returns:
            List of accounts.
        """
        accounts = await self._fetch(
            "get_accounts",
            "/accounts/list.json",
            "accounts",
            ApiList[Account],
            params or AccountsListParams(),
        )
        return accounts.items

    # Site endpoints

    async def get_sites(self, params: SitesListParams | None = None) -> list[SiteDetails]:
        """Get the sites related to the API key.

        Args:
            params: Paging, search, sort and status filter. The API returns
                at most 100 sites per call; use ``start_index`` for the rest.

        Returns:
            List of sites.
        """
        sites = await self._fetch(
            "get_sites",
            "/sites/list.json",
            "sites",
            ApiList[SiteDetails],
            params or SitesListParams(),
        )
        return sites.items

    async def get_site_details(self, site_id: int) -> SiteDetails:
        """Get site details such as name, location and status.

        Args:
            site_id: Site ID.

        Returns:
            Site details.
        """
        return await self._fetch(
            "get_site_details", f"/site/{site_id}/details.json", "details", SiteDetails
        )

    async def get_data_period(self, site_id: int) -> DataPeriod:
        """Get the energy production start and end dates of a site.

        Args:
            site_id: Site ID.

        Returns:
            Data period; both dates are None if the site never transmitted.
        """
        return await self._fetch(
            "get_data_period", f"/site/{site_id}/dataPeriod.json", "dataPeriod", DataPeriod
        )

    async def get_data_period_bulk(self, site_ids: Iterable[int]) -> list[SiteDataPeriod]:
        """Get the energy production start and end dates of several sites.

        The API answers 403 if any of the sites is not visible to the key.

        Args:
            site_ids: Site IDs.

        Returns:
            Data period per site.
        """
        periods = await self._fetch(
            "get_data_period_bulk",
            f"/sites/{join_site_ids(site_ids)}/dataPeriod.json",
            "datePeriodList",
            ApiList[SiteDataPeriod],
        )
        return periods.items

    # Energy endpoints

    async def get_energy(self, site_id: int, params: SiteEnergyParams) -> Energy:
        """Get site energy measurements, as shown on the site dashboard.

        Args:
            site_id: Site ID.
            params: Date range and time unit.

        Returns:
            Energy measurements.
        """
        return await self._fetch(
            "get_energy", f"/site/{site_id}/energy.json", "energy", Energy, params
        )

    async def get_energy_bulk(
        self,
        site_ids: Iterable[int],
        params: SiteEnergyParams,
    ) -> EnergyBulkList:
        """Get energy measurements of several sites.

        Args:
            site_ids: Site IDs.
            params: Date range and time unit.

        Returns:
            Energy measurements per site.
        """
        return await self._fetch(
            "get_energy_bulk",
            f"/sites/{join_site_ids(site_ids)}/energy.json",
            "sitesEnergy",
            EnergyBulkList,
            params,
        )

    async def get_time_frame_energy(
        self,
        site_id: int,
        params: SiteTotalEnergyParams,
    ) -> TimeFrameEnergy:
        """Get the total on-grid energy produced in a period.

        Args:
            site_id: Site ID.
            params: Date range.

        Returns:
            Total energy with lifetime readings at both ends.
        """
        return await self._fetch(
            "get_time_frame_energy",
            f"/site/{site_id}/timeFrameEnergy.json",
            "timeFrameEnergy",
            TimeFrameEnergy,
            params,
        )

    async def get_time_frame_energy_bulk(
        self,
        site_ids: Iterable[int],
        params: SiteTotalEnergyParams,
    ) -> list[SiteTimeFrameEnergy]:
        """Get the total energy produced in a period for several sites."""
        energy = await self._fetch(
            "get_time_frame_energy_bulk",
            f"/sites/{join_site_ids(site_ids)}/timeFrameEnergy.json",
            "timeFrameEnergyList",
            ApiList[SiteTimeFrameEnergy],
            params,
        )
        return energy.items

    async def get_energy_details(
        self,
        site_id: int,
        params: MetersDateTimeRangeParams,
    ) -> EnergyDetails:
        """Get detailed energy measurements from meters.

        Args:
            site_id: Site ID.
            params: Time range, time unit and meter selection.

        Returns:
            Energy measurements per meter.
        """
        return await self._fetch(
            "get_energy_details",
            f"/site/{site_id}/energyDetails.json",
            "energyDetails",
            EnergyDetails,
            params,
        )

    # Power endpoints

    async def get_power(self, site_id: int, params: DateTimeRangeParams) -> Power:
        """Get site power measurements in 15 minute resolution.

        Args:
            site_id: Site ID.
            params: Time range, at most one month.

        Returns:
            Power measurements.
        """
        return await self._fetch(
            "get_power", f"/site/{site_id}/power.json", "power", Power, params
        )

    async def get_power_bulk(
        self,
        site_ids: Iterable[int],
        params: DateTimeRangeParams,
    ) -> PowerBulkList:
        """Get power measurements of several sites."""
        return await self._fetch(
            "get_power_bulk",
            f"/sites/{join_site_ids(site_ids)}/power.json",
            "powerDateValuesList",
            PowerBulkList,
            params,
        )

    async def get_power_details(
        self,
        site_id: int,
        params: SitePowerDetailsParams,
    ) -> PowerDetails:
        """Get detailed power measurements from meters.

        Args:
            site_id: Site ID.
            params: Time range and meter selection.

        Returns:
            Power measurements per meter.
        """
        return await self._fetch(
            "get_power_details",
            f"/site/{site_id}/powerDetails.json",
            "powerDetails",
            PowerDetails,
            params,
        )

    async def get_power_flow(self, site_id: int) -> CurrentPowerFlow:
        """Get the current power flow between PV, storage, loads and grid.

        Args:
            site_id: Site ID.

        Returns:
            Current power flow.
        """
        return await self._fetch(
            "get_power_flow",
            f"/site/{site_id}/currentPowerFlow.json",
            "siteCurrentPowerFlow",
            CurrentPowerFlow,
        )

    # Overview endpoints

    async def get_overview(self, site_id: int) -> Overview:
        """Get the site overview.

        Args:
            site_id: Site ID.

        Returns:
            Lifetime, yearly, monthly and daily energy plus current power.
        """
        return await self._fetch(
            "get_overview", f"/site/{site_id}/overview.json", "overview", Overview
        )

    async def get_overview_bulk(self, site_ids: Iterable[int]) -> list[SiteOverview]:
        """Get the overview of several sites."""
        overviews = await self._fetch(
            "get_overview_bulk",
            f"/sites/{join_site_ids(site_ids)}/overview.json",
            "sitesOverviews",
            ApiList[SiteOverview],
        )
        return overviews.items

    # Storage endpoints

    async def get_storage_data(
        self,
        site_id: int,
        params: StorageDataParams,
    ) -> list[StorageBattery]:
        """Get storage (battery) state of energy, power and lifetime energy.

        Args:
            site_id: Site ID.
            params: Time range (at most one week) and battery selection.

        Returns:
            Storage data per battery.
        """
        storage = await self._fetch(
            "get_storage_data",
            f"/site/{site_id}/storageData.json",
            "storageData",
            ApiList[StorageBattery],
            params,
        )
        return storage.items

    # Image endpoints

    async def get_site_image(
        self,
        site_id: int,
        params: SiteImageParams | None = None,
    ) -> bytes:
        """Get the site image as uploaded by the user.

        Passing the ``hash`` of an unchanged image makes the API answer 304,
        which surfaces as an ``ApiError``.

        Args:
            site_id: Site ID.
            params: Scaling and hash options.

        Returns:
            Image bytes.
        """
        return await self._request(
            "get_site_image",
            f"/site/{site_id}/siteImage/image.jpg",
            params or SiteImageParams(),
        )

    async def get_installer_image(self, site_id: int) -> bytes:
        """Get the site installer logo, or the account installer logo if there is none."""
        return await self._request("get_installer_image", f"/site/{site_id}/installerImage/image.jpg")

    # Environmental benefits endpoints

    async def get_environmental_benefits(
        self,
        site_id: int,
        params: EnvBenefitsParams | None = None,
    ) -> EnvBenefits:
        """Get environmental benefits data for a site.

        Args:
            site_id: Site ID.
            params: Unit system for gas emissions.

        Returns:
            CO2 saved, trees planted and light bulbs powered.
        """
        return await self._fetch(
            "get_environmental_benefits",
            f"/site/{site_id}/envBenefits.json",
            "envBenefits",
            EnvBenefits,
            params or EnvBenefitsParams(),
        )

    # Inventory and meter endpoints

    async def get_inventory(self, site_id: int) -> Inventory:
        """Get the SolarEdge equipment installed at a site.

        Args:
            site_id: Site ID.

        Returns:
            Inverters, meters, sensors, gateways and batteries.
        """
        return await self._fetch(
            "get_inventory", f"/site/{site_id}/inventory.json", "Inventory", Inventory
        )

    async def get_meters(self, site_id: int, params: MetersDateTimeRangeParams) -> Meters:
        """Get lifetime energy readings of each meter at a site.

        Args:
            site_id: Site ID.
            params: Time range, time unit and meter selection.

        Returns:
            Meter readings.
        """
        return await self._fetch(
            "get_meters",
            f"/site/{site_id}/meters.json",
            "meterEnergyDetails",
            Meters,
            params,
        )

    async def get_sensor_data(
        self,
        site_id: int,
        params: SensorsDateTimeRangeParams,
    ) -> list[SensorData]:
        """Get data of all sensors at a site, grouped by gateway.

        Args:
            site_id: Site ID.
            params: Time range, at most one week.

        Returns:
            Sensor telemetries per gateway.
        """
        sensors = await self._fetch(
            "get_sensor_data",
            f"/site/{site_id}/sensors.json",
            "siteSensors",
            ApiList[SensorData],
            params,
        )
        return sensors.items

    # Equipment endpoints

    async def get_equipment(self, site_id: int) -> list[Reporter]:
        """Get the inverters and SMIs at a site.

        Args:
            site_id: Site ID.

        Returns:
            List of equipment.
        """
        reporters = await self._fetch(
            "get_equipment", f"/equipment/{site_id}/list.json", "reporters", ApiList[Reporter]
        )
        return reporters.items

    async def get_equipment_sensors(self, site_id: int) -> list[SensorSummary]:
        """Get the sensors at a site, grouped by gateway."""
        sensors = await self._fetch(
            "get_equipment_sensors",
            f"/equipment/{site_id}/sensors.json",
            "SiteSensors",
            ApiList[SensorSummary],
        )
        return sensors.items

    async def get_inverter_data(
        self,
        site_id: int,
        serial_number: str,
        params: DateTimeRangeParams,
    ) -> list[InverterTelemetry]:
        """Get inverter telemetry data.

        Args:
            site_id: Site ID.
            serial_number: Inverter serial number.
            params: Time range, at most one week.

        Returns:
            List of telemetry readings.
        """
        data = await self._fetch(
            "get_inverter_data",
            f"/equipment/{site_id}/{quote(serial_number, safe='')}/data.json",
            "data",
            ApiList[InverterTelemetry],
            params,
        )
        return data.items

    async def get_equipment_changelog(
        self,
        site_id: int,
        serial_number: str,
    ) -> list[EquipmentChange]:
        """Get component replacements of an inverter, optimizer, battery or gateway, by date.

        Args:
            site_id: Site ID.
            serial_number: Equipment serial number.

        Returns:
            List of replacements.
        """
        changes = await self._fetch(
            "get_equipment_changelog",
            f"/equipment/{site_id}/{quote(serial_number, safe='')}/changeLog.json",
            "ChangeLog",
            ApiList[EquipmentChange],
        )
        return changes.items
