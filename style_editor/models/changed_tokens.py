"""Export schema for the "changed tokens" summary."""

from typing import Dict, Union

from pydantic import BaseModel, Field

ComponentUpdate = Dict[str, Union[str, Dict[str, str]]]


class ChangedTokensSummary(BaseModel):
    """Edited values grouped by component id.

    Subcomponent edits are nested one level deeper under the subcomponent id.
    """

    component_updates: Dict[str, ComponentUpdate] = Field(
        default_factory=dict,
        description="Component id -> key id -> new value",
    )

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)
