"""Enumerations used by SolarEdge API requests and responses.

Each member's value is the exact token the API sends or expects on the wire.
Member names are free to change; values are not.
"""

from enum import Enum, IntEnum, unique


@unique
class SortOrder(str, Enum):
    """Sort order for list endpoints."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"


@unique
class SiteSortBy(str, Enum):
    """Sort property for the sites list."""

    NAME = "Name"
    COUNTRY = "Country"
    STATE = "State"
    CITY = "City"
    ADDRESS = "Address"
    ZIP = "Zip"
    STATUS = "Status"
    PEAK_POWER = "PeakPower"
    INSTALLATION_DATE = "InstallationDate"
    AMOUNT = "Amount"  # amount of alerts
    MAX_SEVERITY = "MaxSeverity"  # alert severity
    CREATION_TIME = "CreationTime"


@unique
class AccountSortBy(str, Enum):
    """Sort property for the accounts list."""

    NAME = "Name"
    COUNTRY = "Country"
    CITY = "City"
    ADDRESS = "Address"
    ZIP = "Zip"
    FAX = "Fax"
    PHONE = "Phone"
    NOTES = "Notes"


@unique
class SiteStatus(str, Enum):
    """Status of a site as reported by the API."""

    ACTIVE = "Active"
    PENDING = "Pending"
    PENDING_COMMUNICATION = "PendingCommunication"
    DISABLED = "Disabled"


@unique
class FilterSiteStatus(str, Enum):
    """Site status values accepted by the sites list filter."""

    ACTIVE = "Active"
    PENDING = "Pending"
    PENDING_COMMUNICATION = "PendingCommunication"
    DISABLED = "Disabled"
    ALL = "All"


@unique
class TimeUnit(str, Enum):
    """Aggregation granularity."""

    QUARTER_OF_AN_HOUR = "QUARTER_OF_AN_HOUR"
    HOUR = "HOUR"
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


@unique
class MeterType(str, Enum):
    """Meter readings available from the power and energy details endpoints."""

    PRODUCTION = "Production"
    CONSUMPTION = "Consumption"
    SELF_CONSUMPTION = "SelfConsumption"  # virtual, calculated
    FEED_IN = "FeedIn"  # export to grid
    PURCHASED = "Purchased"  # import from grid


@unique
class MeterForm(str, Enum):
    """Whether a meter is a hardware device or calculated."""

    PHYSICAL = "physical"
    VIRTUAL = "virtual"


@unique
class InverterMode(str, Enum):
    """Inverter operating mode reported in telemetry."""

    OFF = "OFF"
    SLEEPING = "SLEEPING"  # night mode
    STARTING = "STARTING"  # pre-production
    MPPT = "MPPT"  # production
    THROTTLED = "THROTTLED"  # forced power reduction
    SHUTTING_DOWN = "SHUTTING_DOWN"
    FAULT = "FAULT"
    STANDBY = "STANDBY"  # maintenance
    LOCKED_STDBY = "LOCKED_STDBY"
    LOCKED_FIRE_FIGHTERS = "LOCKED_FIRE_FIGHTERS"
    LOCKED_FORCE_SHUTDOWN = "LOCKED_FORCE_SHUTDOWN"
    LOCKED_COMM_TIMEOUT = "LOCKED_COMM_TIMEOUT"
    LOCKED_INV_TRIP = "LOCKED_INV_TRIP"
    LOCKED_INV_ARC_DETECTED = "LOCKED_INV_ARC_DETECTED"
    LOCKED_DG = "LOCKED_DG"
    LOCKED_PHASE_BALANCER = "LOCKED_PHASE_BALANCER"
    LOCKED_PRE_COMMISSIONING = "LOCKED_PRE_COMMISSIONING"
    LOCKED_INTERNAL = "LOCKED_INTERNAL"


@unique
class OperationMode(IntEnum):
    """Inverter grid operation mode."""

    ON_GRID = 0
    OFF_GRID_WITH_PV_OR_BATTERY = 1
    OFF_GRID_WITH_GENERATOR = 2


@unique
class SystemUnits(str, Enum):
    """Unit system for environmental benefits."""

    METRICS = "Metrics"
    IMPERIAL = "Imperial"


@unique
class EnergyUnit(str, Enum):
    """Energy unit. Other tokens decode as plain strings."""

    WH = "Wh"


@unique
class PowerUnit(str, Enum):
    """Power unit. Other tokens decode as plain strings."""

    W = "W"
    KW = "kW"


@unique
class Measurer(str, Enum):
    """Device that measured an energy value. Other tokens decode as plain strings."""

    INVERTER = "INVERTER"


@unique
class PowerFlowElement(str, Enum):
    """Element of the current power flow graph."""

    GRID = "GRID"
    LOAD = "Load"
    PV = "PV"
    STORAGE = "Storage"


@unique
class PowerFlowElementStatus(str, Enum):
    """Status of a power flow element."""

    ACTIVE = "Active"
    IDLE = "Idle"
    INACTIVE = "Inactive"
    DISABLED = "Disabled"


@unique
class BatteryState(IntEnum):
    """Battery state reported in storage telemetry."""

    INVALID = 0
    STANDBY = 1
    THERMAL_MANAGEMENT = 2
    ENABLED = 3
    FAULT = 4


@unique
class GasEmissionUnit(str, Enum):
    """Unit for saved gas emissions."""

    KG = "kg"
    LB = "lb"


@unique
class EquipmentCommunicationMethod(str, Enum):
    """Inverter communication method. Other tokens decode as plain strings."""

    ETHERNET = "ETHERNET"


@unique
class SensorType(str, Enum):
    """Sensor category. Other tokens decode as plain strings."""

    IRRADIANCE = "IRRADIANCE"
    TEMPERATURE = "TEMPERATURE"


@unique
class SensorMeasurement(str, Enum):
    """What a sensor measures. Other tokens decode as plain strings."""

    GLOBAL_HORIZONTAL_IRRADIANCE = "SensorGlobalHorizontalIrradiance"
    DIFFUSED_IRRADIANCE = "SensorDiffusedIrradiance"
    AMBIENT_TEMPERATURE = "SensorAmbientTemperature"
