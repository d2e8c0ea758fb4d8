"""API version models."""

from seclient.api.models.base import ApiModel


class VersionSpec(ApiModel):
    """API version in ``major.minor.revision`` form."""

    release: str
