"""Base Pydantic schema with strict validation."""
from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Base model that forbids extra fields.

    Request and response models of the analysis API inherit from this class,
    so unknown keys in a price bar or request body are rejected instead of
    silently ignored.
    """

    model_config = ConfigDict(extra="forbid")
