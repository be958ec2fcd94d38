"""Tests for configuration loading and adaptation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from blueprints.application import LookupPolicy
from blueprints.application.config import (
    BlueprintsConfiguration,
    ConfigError,
    config_to_director,
    config_to_registries,
    load_config,
    load_config_from_dict,
)
from blueprints.domain.products import RefusalProduct
from blueprints.domain.software import UnsupportedSoftwareFactory


class TestLoadConfigFromDict:
    """Tests for dictionary-based loading."""

    def test_empty_dict_uses_defaults(self) -> None:
        config = load_config_from_dict({})

        assert config.schema_version == "1.0"
        assert config.registries.products is LookupPolicy.LENIENT
        assert config.registries.software is LookupPolicy.STRICT
        assert config.director.require_complete is False

    def test_policies_parsed_from_strings(self) -> None:
        config = load_config_from_dict(
            {"registries": {"products": "strict", "software": "lenient"}}
        )

        assert config.registries.products is LookupPolicy.STRICT
        assert config.registries.software is LookupPolicy.LENIENT

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"registries": {"products": "sometimes"}})

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "registries.products"

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Configuration validation failed"):
            load_config_from_dict({"registries": {"operations": "lenient"}})

    def test_unsupported_schema_version_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported schema version"):
            load_config_from_dict({"schema_version": "9.9"})


class TestLoadConfig:
    """Tests for file-based loading."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.path == path
        assert exc_info.value.details[0]["line"] == 1

    def test_unreadable_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.error_type == "file_read_error"

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "blueprints.json"
        path.write_text(json.dumps({"director": {"require_complete": True}}))

        config = load_config(path)

        assert config.director.require_complete is True


class TestAdapters:
    """Tests for turning configuration into components."""

    def test_default_registries(self) -> None:
        registries = config_to_registries()

        assert isinstance(registries.products.create("nope"), RefusalProduct)
        assert registries.software.policy is LookupPolicy.STRICT
        assert list(registries.by_name()) == [
            "operation",
            "product",
            "software",
            "shape",
            "house",
        ]

    def test_configured_policies(self) -> None:
        config = BlueprintsConfiguration.model_validate(
            {"registries": {"products": "strict", "software": "lenient"}}
        )

        registries = config_to_registries(config)

        assert registries.products.policy is LookupPolicy.STRICT
        assert isinstance(registries.software.create("beos"), UnsupportedSoftwareFactory)

    def test_director_from_config(self) -> None:
        config = load_config_from_dict({"director": {"require_complete": True}})

        assert config_to_director(config).require_complete is True
        assert config_to_director().require_complete is False
