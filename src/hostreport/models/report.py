"""Report models: the tabs that make up the rendered page."""

from __future__ import annotations

import re

from pydantic import BaseModel, field_validator, model_validator

# Tab ids are used as DOM ids and inside the generated showTab('<id>') call.
_TAB_ID_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


class Tab(BaseModel):
    """A named, labelled section of the report holding one HTML fragment."""

    id: str
    label: str = ""
    content: str = ""

    @field_validator("id")
    @classmethod
    def _check_id(cls, value: str) -> str:
        if not _TAB_ID_RE.match(value):
            raise ValueError(
                f"Invalid tab id '{value}': must start with a letter and contain "
                "only letters, digits and underscores"
            )
        return value

    @model_validator(mode="after")
    def _default_label(self) -> "Tab":
        if not self.label:
            self.label = self.id
        return self
