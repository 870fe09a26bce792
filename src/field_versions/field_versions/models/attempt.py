# ABOUTME: Diagnostic record of one failed registration trial during resolution
# ABOUTME: Collected in order and attached to the terminal no-match error

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from field_versions.models.version_tag import VersionTag


class AttemptStage(str, Enum):
    """
    Stage at which a registration trial failed.

    Attributes:
        STRUCTURAL (str): The content did not fit the registration's wire type.
        CONVERSION (str): The content fit, but the converter rejected the value.
    """

    STRUCTURAL = "structural"
    CONVERSION = "conversion"

    def __str__(self) -> str:
        return self.value


class ResolutionAttempt(BaseModel):
    """One failed trial: which tag, against which wire type, and why."""

    model_config = ConfigDict(frozen=True)

    tag: SerializeAsAny[VersionTag] = Field(..., description="Tag of the registration that was tried")
    wire_type: str = Field(..., description="Readable name of the wire type")
    stage: AttemptStage = Field(..., description="Where the trial failed")
    error: str = Field(..., description="Failure message")
    error_type: str = Field(..., description="Class name of the underlying error")

    def __str__(self) -> str:
        return f"{self.tag} ({self.wire_type}): {self.stage} failure: {self.error}"
