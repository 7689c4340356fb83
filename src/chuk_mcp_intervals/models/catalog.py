"""
Catalog models - named intervals loaded from YAML.

A named interval gives a familiar name ("tritone", "whole tone") to an
interval written in shorthand. The notation is validated on load, so every
model in a catalog is known to parse.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_intervals.core.notation import parse_signed_interval
from chuk_mcp_intervals.core.signed_interval import SignedInterval


class NamedInterval(BaseModel):
    """A catalog entry mapping a name to interval shorthand."""

    name: str = Field(description="Unique catalog name, e.g. 'tritone'")
    notation: str = Field(description="Interval shorthand, e.g. 'A4' or '-P8'")
    aliases: list[str] = Field(default_factory=list, description="Alternative names")
    description: str = Field(default="", description="Human-readable description")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Normalize the name to lowercase with single spaces."""
        name = " ".join(v.split()).lower()
        if not name:
            raise ValueError("Named interval requires a non-empty name")
        return name

    @field_validator("aliases")
    @classmethod
    def validate_aliases(cls, v: list[str]) -> list[str]:
        """Normalize aliases the same way as names."""
        return [" ".join(alias.split()).lower() for alias in v if alias.strip()]

    @field_validator("notation")
    @classmethod
    def validate_notation(cls, v: str) -> str:
        """Validate the shorthand parses."""
        parse_signed_interval(v)
        return v.strip()

    @property
    def interval(self) -> SignedInterval:
        """The interval this entry names."""
        return parse_signed_interval(self.notation)

    def matches(self, name: str) -> bool:
        """Whether name (case-insensitive) is this entry's name or an alias."""
        key = " ".join(name.split()).lower()
        return key == self.name or key in self.aliases
