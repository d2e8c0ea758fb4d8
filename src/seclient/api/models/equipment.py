"""Pydantic models for equipment-level SolarEdge API responses."""

from pydantic import Field

from seclient.api.dates import ApiDate, ApiDateTime
from seclient.api.enums import InverterMode, OperationMode
from seclient.api.models.base import ApiModel, SensorMeasurementValue, SensorTypeValue


class Sensor(ApiModel):
    """A sensor connected to a gateway."""

    name: str
    measurement: SensorMeasurementValue
    sensor_type: SensorTypeValue = Field(alias="type")


class SensorSummary(ApiModel):
    """Sensors connected to one gateway."""

    connected_to: str
    count: int
    sensors: list[Sensor]


class Reporter(ApiModel):
    """An inverter or SMI in the equipment list."""

    name: str
    manufacturer: str
    model: str
    serial_number: str
    kw_p_dc: float | None = Field(default=None, alias="kWpDC")


class PhaseData(ApiModel):
    """AC measurements of one phase."""

    ac_current: float
    ac_voltage: float
    ac_frequency: float
    apparent_power: float | None = None  # VA
    # Communication board 2.474 and later
    active_power: float | None = None
    reactive_power: float | None = None  # VAR
    cos_phi: float | None = None


class InverterTelemetry(ApiModel):
    """One inverter telemetry sample."""

    date: ApiDateTime
    total_active_power: float
    dc_voltage: float | None = None
    ground_fault_resistance: float | None = None
    power_limit: float
    lifetime_energy: float | None = None
    total_energy: float
    temperature: float  # Celsius
    inverter_mode: InverterMode
    operation_mode: OperationMode
    v_l1_to_n: float | None = Field(default=None, alias="vL1ToN")
    v_l2_to_n: float | None = Field(default=None, alias="vL2ToN")
    v_l1_to_2: float | None = Field(default=None, alias="vL1To2")
    v_l2_to_3: float | None = Field(default=None, alias="vL2To3")
    v_l3_to_1: float | None = Field(default=None, alias="vL3To1")
    l1_data: PhaseData = Field(alias="L1Data")
    l2_data: PhaseData | None = Field(default=None, alias="L2Data")
    l3_data: PhaseData | None = Field(default=None, alias="L3Data")


class EquipmentChange(ApiModel):
    """A component replacement from the equipment change log."""

    serial_number: str
    part_number: str
    date: ApiDate
