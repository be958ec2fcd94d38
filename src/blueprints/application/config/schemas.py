"""Pydantic models for blueprints configuration files.

A configuration only selects policies; it never adds new variants.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blueprints.application.registry import LookupPolicy

# Supported schema versions for configuration files
# Version 1.0: Registry lookup policies and director completeness check
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class RegistryPolicyConfig(BaseModel):
    """Unknown-key policy for each registry that offers a choice.

    Attributes:
        products: Policy for the simple product factory.
        software: Policy for the software family factory lookup.
    """

    model_config = ConfigDict(extra="forbid")

    products: LookupPolicy = LookupPolicy.LENIENT
    software: LookupPolicy = LookupPolicy.STRICT


class DirectorConfig(BaseModel):
    """Director behaviour.

    Attributes:
        require_complete: Reject houses with unset fields.
    """

    model_config = ConfigDict(extra="forbid")

    require_complete: bool = False


class BlueprintsConfiguration(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", description="Configuration schema version")
    registries: RegistryPolicyConfig = Field(default_factory=RegistryPolicyConfig)
    director: DirectorConfig = Field(default_factory=DirectorConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v


__all__ = [
    "BlueprintsConfiguration",
    "DirectorConfig",
    "RegistryPolicyConfig",
    "SUPPORTED_VERSIONS",
]
