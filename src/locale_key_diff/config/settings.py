"""Validated run configuration."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..keys.models import SharedFolderSpec


class ActionInputs(BaseModel):
    """Inputs of one comparison run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    shared_folder_paths: List[SharedFolderSpec] = Field(..., description="Shared folder roots")
    default_locale: str = Field(default="en")
    default_base: str = Field(default="")
    compare_base: str = Field(default="")
    compare_locales: List[str] = Field(..., description="Comparison locale folder names")
    debug: bool = Field(default=False)

    @field_validator("shared_folder_paths", mode="before")
    @classmethod
    def validate_shared_folder_paths(cls, v: Any) -> Any:
        """Accept ``[["path"], ["path", "prefix"], ...]`` entries."""
        if not isinstance(v, list) or not v:
            raise ValueError("must be a non-empty array of arrays")

        specs = []
        for entry in v:
            if isinstance(entry, SharedFolderSpec):
                specs.append(entry)
                continue
            if not isinstance(entry, list) or not entry:
                raise ValueError(f"entry {entry!r} must be a non-empty array")
            if not isinstance(entry[0], str):
                raise ValueError(f"entry {entry!r} must start with a path string")
            if len(entry) > 1 and entry[1] is not None and not isinstance(entry[1], str):
                raise ValueError(f"key prefix in entry {entry!r} must be a string")
            specs.append(SharedFolderSpec.from_entry(entry))

        return specs

    @field_validator("compare_locales", mode="before")
    @classmethod
    def validate_compare_locales(cls, v: Any) -> Any:
        if not isinstance(v, list):
            raise ValueError("Array of comparison locale folder names not provided.")
        for locale in v:
            if not isinstance(locale, str) or not locale:
                raise ValueError(f"locale {locale!r} must be a non-empty string")
        return v
