"""Command line configuration via environment variables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from advisor.logic.settings import DEFAULT_MAX_SUGGESTIONS, RuleSet, numeral_eye_indices, validate_rule_set
from advisor.logic.tiles import parse_tile, tile_name, tile_to_34
from shared.validators import StringListEnvSettingsSource, parse_string_list

if TYPE_CHECKING:
    from pydantic_settings.sources.base import PydanticBaseSettingsSource


class AdvisorSettings(BaseSettings):
    model_config = {"env_prefix": "ADVISOR_"}

    eye_tiles: list[str] = [tile_name(i) for i in sorted(numeral_eye_indices())]
    must_declare_tile: str | None = "7z"  # empty string disables the declare rule
    max_suggestions: int = Field(default=DEFAULT_MAX_SUGGESTIONS, ge=1)
    log_dir: str | None = None

    @field_validator("eye_tiles", mode="before")
    @classmethod
    def validate_eye_tiles(cls, v: str | list[str]) -> list[str]:
        return parse_string_list(v)

    @field_validator("must_declare_tile", mode="before")
    @classmethod
    def validate_must_declare_tile(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            StringListEnvSettingsSource(settings_cls, list_fields={"eye_tiles"}),
            dotenv_settings,
            file_secret_settings,
        )

    def to_rule_set(self) -> RuleSet:
        """Build the engine rule set from tile labels, raising on anything the engine cannot use."""
        must_declare_34 = None
        if self.must_declare_tile is not None:
            must_declare_34 = tile_to_34(parse_tile(self.must_declare_tile))
        rules = RuleSet(
            eye_tiles_34=frozenset(tile_to_34(parse_tile(label)) for label in self.eye_tiles),
            must_declare_34=must_declare_34,
            max_suggestions=self.max_suggestions,
        )
        validate_rule_set(rules)
        return rules
