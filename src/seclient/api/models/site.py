"""Pydantic models for site-level SolarEdge API responses."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from seclient.api.dates import ApiDate, ApiDateTime
from seclient.api.enums import (
    BatteryState,
    GasEmissionUnit,
    MeterForm,
    MeterType,
    PowerFlowElement,
    PowerFlowElementStatus,
    SiteStatus,
    TimeUnit,
)
from seclient.api.models.base import (
    ApiModel,
    CommunicationMethodValue,
    EnergyUnitValue,
    MeasurerValue,
    PowerUnitValue,
    SensorTypeValue,
)


def _gas_emission_unit(value: Any) -> Any:
    # "KG", "kg", "Kg"...
    if isinstance(value, str):
        for unit in GasEmissionUnit:
            if unit.value == value.lower():
                return unit
    return value


def _power_flow_element(value: Any) -> Any:
    # Element names come back as "GRID", "grid", "Load", "LOAD"...
    # Unknown names stay strings and fail strict enum validation.
    if isinstance(value, str):
        for element in PowerFlowElement:
            if element.value.lower() == value.lower():
                return element
    return value


# Site details


class Location(ApiModel):
    """Site location details."""

    country: str
    state: str | None = None
    city: str | None = None
    address: str | None = None
    address2: str | None = None
    zip: str | None = None
    time_zone: str
    country_code: str | None = None
    state_code: str | None = None


class Module(ApiModel):
    """Primary solar module details."""

    manufacturer_name: str
    model_name: str
    maximum_power: float
    temperature_coef: float | None = None


class SiteUris(ApiModel):
    """Links to related resources of a site."""

    details: str | None = Field(default=None, alias="DETAILS")
    data_period: str | None = Field(default=None, alias="DATA_PERIOD")
    overview: str | None = Field(default=None, alias="OVERVIEW")
    site_image: str | None = Field(default=None, alias="SITE_IMAGE")
    installer_image: str | None = Field(default=None, alias="INSTALLER_IMAGE")


class PublicSettings(ApiModel):
    """Public settings for a site."""

    name: str | None = None
    is_public: bool | None = None


class SiteDetails(ApiModel):
    """Site entry from the sites list and the site details endpoint."""

    id: int
    name: str
    account_id: int
    status: SiteStatus
    peak_power: float
    last_update_time: ApiDateTime | None = None
    currency: str | None = None
    installation_date: ApiDateTime
    pto_date: ApiDateTime | None = None
    notes: str | None = None
    site_type: str = Field(alias="type")
    location: Location
    primary_module: Module | None = None
    alert_quantity: int | None = None
    alert_severity: str | None = None
    uris: SiteUris | None = None
    public_settings: PublicSettings | None = None


class DataPeriod(ApiModel):
    """Energy production start and end dates. Both are None for a site that never transmitted."""

    start_date: ApiDateTime | None = None
    end_date: ApiDateTime | None = None


class SiteDataPeriod(ApiModel):
    """Data period of one site in a bulk response."""

    site_id: int
    data_period: DataPeriod


# Energy and power


class DateValue(ApiModel):
    """A measurement at a point in time, in the site's time zone.

    ``value`` is None when there is no data for that time.
    """

    date: ApiDateTime
    value: float | None = None


class Energy(ApiModel):
    """Site energy measurements."""

    time_unit: TimeUnit
    unit: EnergyUnitValue
    values: list[DateValue]


class EnergyValues(ApiModel):
    """Measurement series of one site in a bulk response."""

    values: list[DateValue]


class SiteEnergyValues(ApiModel):
    site_id: int
    energy_values: EnergyValues


class EnergyBulkList(ApiModel):
    """Energy measurements of several sites."""

    time_unit: TimeUnit
    unit: EnergyUnitValue
    count: int
    site_energy_list: list[SiteEnergyValues]


class LifetimeEnergy(ApiModel):
    date: ApiDate
    energy: float | None = None
    unit: EnergyUnitValue


class TimeFrameEnergy(ApiModel):
    """Total energy produced in a period, with lifetime readings at both ends."""

    energy: float | None = None
    unit: EnergyUnitValue
    measured_by: MeasurerValue | None = None
    start_lifetime_energy: LifetimeEnergy
    end_lifetime_energy: LifetimeEnergy


class SiteTimeFrameEnergy(ApiModel):
    site_id: int
    time_frame_energy: TimeFrameEnergy


class Power(ApiModel):
    """Site power measurements in 15 minute resolution."""

    time_unit: TimeUnit
    unit: PowerUnitValue
    values: list[DateValue]


class SitePowerValues(ApiModel):
    site_id: int
    power_data_value_series: EnergyValues


class PowerBulkList(ApiModel):
    """Power measurements of several sites."""

    time_unit: TimeUnit
    unit: PowerUnitValue
    count: int
    site_energy_list: list[SitePowerValues]


class LifetimeData(ApiModel):
    energy: float
    revenue: float | None = None


class EnergyData(ApiModel):
    energy: float


class PowerData(ApiModel):
    power: float


class Overview(ApiModel):
    """Site overview: lifetime, yearly, monthly and daily energy plus current power."""

    last_update_time: ApiDateTime
    lifetime_data: LifetimeData = Field(alias="lifeTimeData")
    last_year_data: EnergyData
    last_month_data: EnergyData
    last_day_data: EnergyData
    current_power: PowerData
    measured_by: MeasurerValue | None = None


class SiteOverview(ApiModel):
    site_id: int
    site_overview: Overview


class MeterValues(ApiModel):
    """Measurement series of one meter."""

    meter_type: MeterType = Field(alias="type")
    values: list[DateValue]


class PowerDetails(ApiModel):
    """Detailed power measurements per meter."""

    time_unit: TimeUnit
    unit: PowerUnitValue
    meters: list[MeterValues]


class EnergyDetails(ApiModel):
    """Detailed energy measurements per meter."""

    time_unit: TimeUnit
    unit: EnergyUnitValue
    meters: list[MeterValues]


# Current power flow


class PowerConnection(ApiModel):
    """Direction of power between two elements."""

    from_: Annotated[PowerFlowElement, BeforeValidator(_power_flow_element)] = Field(alias="from")
    to: Annotated[PowerFlowElement, BeforeValidator(_power_flow_element)]


class PowerFlowEntry(ApiModel):
    """Current state of a power flow element.

    Power is always positive; direction is given by the connections.
    """

    status: PowerFlowElementStatus
    current_power: float | None = None


class StoragePowerFlowEntry(PowerFlowEntry):
    """Current state of the site's storage."""

    charge_level: float
    critical: bool
    # Only returned in backup mode
    time_left: int | str | None = None


class CurrentPowerFlow(ApiModel):
    """Current power flow between PV, storage, loads and grid."""

    update_refresh_rate: int | None = None
    unit: PowerUnitValue
    connections: list[PowerConnection]
    grid: PowerFlowEntry = Field(alias="GRID")
    load: PowerFlowEntry = Field(alias="LOAD")
    pv: PowerFlowEntry | None = Field(default=None, alias="PV")
    storage: StoragePowerFlowEntry | None = Field(default=None, alias="STORAGE")


# Storage


class BatteryTelemetry(ApiModel):
    """One storage telemetry sample.

    Positive power means the battery is charging.
    """

    timestamp: ApiDateTime = Field(alias="timeStamp")
    power: float | None = None
    battery_state: BatteryState
    lifetime_energy_charged: float | None = Field(default=None, alias="lifeTimeEnergyCharged")
    lifetime_energy_discharged: float | None = Field(default=None, alias="lifeTimeEnergyDischarged")
    full_pack_energy_available: float | None = None
    internal_temp: float | None = None
    ac_grid_charging: float | None = Field(default=None, alias="ACGridCharging")
    state_of_charge: float | None = None
    battery_percentage_state: float | None = None


class StorageBattery(ApiModel):
    """Storage data of one battery."""

    serial_number: str
    nameplate: float
    model_number: str | None = None
    manufacturer_name: str | None = None
    telemetry_count: int
    telemetries: list[BatteryTelemetry]


# Environmental benefits


class GasEmissionsSaved(ApiModel):
    units: Annotated[GasEmissionUnit, BeforeValidator(_gas_emission_unit)]
    co2: float
    so2: float
    nox: float


class EnvBenefits(ApiModel):
    """Environmental benefits based on site energy production."""

    gas_emission_saved: GasEmissionsSaved
    trees_planted: float
    light_bulbs: float


# Inventory


class InventoryInverter(ApiModel):
    name: str
    manufacturer: str | None = None
    model: str
    cpu_version: str | None = None
    dsp1_version: str | None = None
    dsp2_version: str | None = None
    communication_method: CommunicationMethodValue | None = None
    serial_number: str = Field(alias="SN")
    connected_optimizers: int | None = None


class InventoryMeter(ApiModel):
    name: str
    manufacturer: str | None = None
    model: str | None = None
    serial_number: str | None = Field(default=None, alias="SN")
    meter_type: MeterType = Field(alias="type")
    firmware_version: str | None = None
    connected_to: str | None = None
    connected_solaredge_device_sn: str | None = Field(
        default=None, alias="connectedSolaredgeDeviceSN"
    )
    form: MeterForm


class InventorySensor(ApiModel):
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    id: str
    connected_to: str
    category: SensorTypeValue
    sensor_type: str = Field(alias="type")


class InventoryGateway(ApiModel):
    name: str
    serial_number: str = Field(alias="SN")
    firmware_version: str | None = None


class InventoryBattery(ApiModel):
    name: str
    serial_number: str = Field(alias="SN")
    manufacturer: str
    model: str
    nameplate_capacity: float
    firmware_version: str | None = None
    connected_to: str | None = None
    connected_inverter_sn: str | None = None


class Inventory(ApiModel):
    """SolarEdge equipment installed at a site.

    Every category is present; a site with no equipment of a kind gets an
    empty list.
    """

    inverters: list[InventoryInverter]
    meters: list[InventoryMeter]
    sensors: list[InventorySensor]
    gateways: list[InventoryGateway]
    batteries: list[InventoryBattery]


# Meters and sensors


class MeterDetail(ApiModel):
    """Lifetime energy readings of one meter."""

    meter_serial_number: str
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    model: str
    meter_type: MeterType
    values: list[DateValue]


class Meters(ApiModel):
    time_unit: TimeUnit
    unit: EnergyUnitValue
    meters: list[MeterDetail]


class SensorTelemetry(ApiModel):
    """Sensor readings at one timestamp, metric units."""

    date: ApiDateTime
    ambient_temperature: float | None = None
    module_temperature: float | None = None
    wind_speed: float | None = None


class SensorData(ApiModel):
    """Sensor telemetries grouped by the gateway they are connected to."""

    connected_to: str
    count: int
    telemetries: list[SensorTelemetry]
