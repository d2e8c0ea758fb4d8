"""Pydantic models for SolarEdge API responses."""

from seclient.api.models.accounts import Account
from seclient.api.models.base import ApiList, ApiModel
from seclient.api.models.equipment import (
    EquipmentChange,
    InverterTelemetry,
    PhaseData,
    Reporter,
    Sensor,
    SensorSummary,
)
from seclient.api.models.site import (
    BatteryTelemetry,
    CurrentPowerFlow,
    DataPeriod,
    DateValue,
    Energy,
    EnergyBulkList,
    EnergyDetails,
    EnvBenefits,
    GasEmissionsSaved,
    Inventory,
    InventoryBattery,
    InventoryGateway,
    InventoryInverter,
    InventoryMeter,
    InventorySensor,
    Location,
    MeterDetail,
    Meters,
    MeterValues,
    Module,
    Overview,
    Power,
    PowerBulkList,
    PowerConnection,
    PowerDetails,
    PowerFlowEntry,
    SensorData,
    SensorTelemetry,
    SiteDataPeriod,
    SiteDetails,
    SiteOverview,
    SiteTimeFrameEnergy,
    StorageBattery,
    StoragePowerFlowEntry,
    TimeFrameEnergy,
)
from seclient.api.models.version import VersionSpec

__all__ = [
    "Account",
    "ApiList",
    "ApiModel",
    "BatteryTelemetry",
    "CurrentPowerFlow",
    "DataPeriod",
    "DateValue",
    "Energy",
    "EnergyBulkList",
    "EnergyDetails",
    "EnvBenefits",
    "EquipmentChange",
    "GasEmissionsSaved",
    "Inventory",
    "InventoryBattery",
    "InventoryGateway",
    "InventoryInverter",
    "InventoryMeter",
    "InventorySensor",
    "InverterTelemetry",
    "Location",
    "MeterDetail",
    "Meters",
    "MeterValues",
    "Module",
    "Overview",
    "PhaseData",
    "Power",
    "PowerBulkList",
    "PowerConnection",
    "PowerDetails",
    "PowerFlowEntry",
    "Reporter",
    "Sensor",
    "SensorData",
    "SensorSummary",
    "SensorTelemetry",
    "SiteDataPeriod",
    "SiteDetails",
    "SiteOverview",
    "SiteTimeFrameEnergy",
    "StorageBattery",
    "StoragePowerFlowEntry",
    "TimeFrameEnergy",
    "VersionSpec",
]
