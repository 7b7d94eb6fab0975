from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, field_validator


# ---- Dataset record: one Italian verb with German and Italian forms ----
class VerbRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    verb: StrictStr = Field(..., description="Italian infinitive, used as lookup key")
    german_forms: List[StrictStr] = Field(default_factory=list, alias="de", description="German conjugation lines")
    italian_forms: List[StrictStr] = Field(default_factory=list, alias="it", description="Italian conjugation lines")

    @field_validator("german_forms", "italian_forms", mode="before")
    @classmethod
    def _null_to_empty(cls, v: Optional[list]) -> list:
        # `null` in the JSON means "no forms"
        return [] if v is None else v


VerbList = TypeAdapter(List[VerbRecord])
