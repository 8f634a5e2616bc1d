from pathlib import Path

import pytest

from json2dart.config import GeneratorConfig, load_generator_config, save_generator_config
from json2dart.errors import ConfigError


def test_defaults(default_config: GeneratorConfig) -> None:
    assert default_config.model_suffix == "Model"
    assert default_config.artifact_name("address") == "address_model.dart"
    assert default_config.field_order == "document"


def test_yaml_roundtrip(tmp_path: Path) -> None:
    config = GeneratorConfig(model_suffix="Dto", field_order="sorted")
    path = tmp_path / "gen.yaml"
    save_generator_config(config, path)
    assert load_generator_config(path) == config


def test_json_config(tmp_path: Path) -> None:
    path = tmp_path / "gen.json"
    path.write_text('{"extension": ".g.dart"}')
    assert load_generator_config(path).extension == ".g.dart"


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "gen.yml"
    path.write_text("")
    assert load_generator_config(path) == GeneratorConfig()


@pytest.mark.parametrize(
    "text",
    [
        "extension: dart\n",
        "model_suffix: 'Bad-Suffix'\n",
        "unknown_key: 1\n",
        "field_order: random\n",
        "- a\n- b\n",
        "model_suffix: [unclosed\n",
    ],
)
def test_invalid_configs_raise(tmp_path: Path, text: str) -> None:
    path = tmp_path / "gen.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_generator_config(path)


def test_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_generator_config(tmp_path / "nope.yaml")


def test_save_into_unwritable_location_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file")
    with pytest.raises(ConfigError):
        save_generator_config(GeneratorConfig(), blocker / "gen.yaml")


@pytest.mark.parametrize("field", ["model_suffix", "nested_list_suffix"])
def test_suffixes_reject_non_identifier_characters(field: str) -> None:
    with pytest.raises(ValueError):
        GeneratorConfig(**{field: "a.b"})
    assert getattr(GeneratorConfig(**{field: "Dto_2"}), field) == "Dto_2"
