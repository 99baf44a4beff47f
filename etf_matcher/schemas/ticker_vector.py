from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Unsigned counts. Strict so that "100" or true in the manifest is rejected.
Count = Annotated[int, Field(ge=0, strict=True)]


class TickerVectorConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    path: str = Field(strict=True)
    description: Optional[str] = None
    # The live manifest spells this key "proto_noteboook".
    proto_notebook: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("proto_noteboook", "proto_notebook"),
        serialization_alias="proto_noteboook",
    )
    last_training_time: Optional[str] = None
    features: Optional[Count] = None
    vector_dimensions: Optional[Count] = None
    training_sequence_length: Optional[Count] = None
    training_data_sources: Optional[tuple[str, ...]] = None


ConfigMap = dict[str, TickerVectorConfig]


class ManifestDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ticker_vector_config: ConfigMap
