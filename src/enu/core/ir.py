"""
Frozen descriptions of finished enum types.

These models are what an enum type looks like once declaration is over:
plain data, safe to hand to exporters and tooling.

Example:
    PostStatus.to_spec().model_dump()
    {
        "name": "PostStatus",
        "title": "Post Status",
        "parent": None,
        "options": [
            {"name": "draft", "value": 0, "position": 0},
            {"name": "published", "value": 1, "position": 1},
        ],
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OptionSpec(BaseModel):
    """
    A single option of an enum type.

    Attributes:
        name: Option identifier (e.g. draft)
        value: Integer code stored by persistence layers
        position: Declaration order, 0-based; independent of value
    """

    name: str
    value: int
    position: int

    model_config = ConfigDict(frozen=True)


class EnumSpec(BaseModel):
    """
    An enum type definition.

    Attributes:
        name: Enum type identifier (e.g. PostStatus)
        title: Human-readable title
        parent: Name of the enum type this one was derived from
        options: Options in declaration order, inherited ones first
    """

    name: str
    title: str | None = None
    parent: str | None = None
    options: list[OptionSpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def default(self) -> str | None:
        """Name of the first declared option, or None for an empty enum."""
        return self.options[0].name if self.options else None

    def get_option(self, name: str) -> OptionSpec | None:
        """Get option by name."""
        for option in self.options:
            if option.name == name:
                return option
        return None
