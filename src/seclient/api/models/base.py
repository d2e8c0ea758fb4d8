"""Base classes shared by SolarEdge response models."""

from typing import Annotated, Any, Generic, TypeVar

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from seclient.api.enums import (
    EnergyUnit,
    EquipmentCommunicationMethod,
    Measurer,
    PowerUnit,
    SensorMeasurement,
    SensorType,
)

T = TypeVar("T")


class ApiModel(BaseModel):
    """Immutable model populated from camelCase API JSON.

    Validation is strict: a JSON value of the wrong type is an error, never
    coerced. Validate with ``model_validate_json`` so enum tokens decode.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        strict=True,
    )


def _as_list(value: Any) -> list[Any]:
    # A single item is sometimes returned as an object instead of a list
    if isinstance(value, list):
        return value
    return [value]


class ApiList(ApiModel, Generic[T]):
    """The API's list envelope, ``{"count": n, "<name>": [...]}``.

    The count and list members go by several names depending on the endpoint.
    """

    count: int | None = Field(
        default=None,
        validation_alias=AliasChoices("count", "total", "batteryCount"),
    )
    items: Annotated[list[T] | T, AfterValidator(_as_list)] = Field(
        validation_alias=AliasChoices(
            "list",
            "site",
            "data",
            "telemetries",
            "batteries",
            "siteEnergyList",
            "timeFrameEnergyList",
        ),
    )


# Vendor vocabularies that grow over time: known tokens decode to the enum
# member, anything else stays a plain string.
EnergyUnitValue = Annotated[EnergyUnit | str, Field(union_mode="left_to_right")]
PowerUnitValue = Annotated[PowerUnit | str, Field(union_mode="left_to_right")]
MeasurerValue = Annotated[Measurer | str, Field(union_mode="left_to_right")]
CommunicationMethodValue = Annotated[
    EquipmentCommunicationMethod | str, Field(union_mode="left_to_right")
]
SensorTypeValue = Annotated[SensorType | str, Field(union_mode="left_to_right")]
SensorMeasurementValue = Annotated[SensorMeasurement | str, Field(union_mode="left_to_right")]
