"""Public models for the poster client."""

from postergen_client.models.requests import GenerationRequest
from postergen_client.models.responses import (
    DataEnvelope,
    DataPayload,
    ListDataEnvelope,
    ListDataPayload,
)
from postergen_client.models.schemas import (
    FieldDescriptor,
    GeneratedPoster,
    GenerationResult,
    Logo,
    PosterRecord,
    Template,
)

__all__ = [
    "DataEnvelope",
    "DataPayload",
    "FieldDescriptor",
    "GeneratedPoster",
    "GenerationRequest",
    "GenerationResult",
    "ListDataEnvelope",
    "ListDataPayload",
    "Logo",
    "PosterRecord",
    "Template",
]
