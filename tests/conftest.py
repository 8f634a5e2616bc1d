from pathlib import Path
from typing import Any

import pytest
import ujson as json

from json2dart.config import GeneratorConfig


@pytest.fixture()
def user_document() -> dict[str, Any]:
    return {"id": 1, "name": "Bob", "tags": ["a", "b"], "address": {"city": "X"}}


@pytest.fixture()
def user_path(tmp_path: Path, user_document: dict[str, Any]) -> Path:
    path = tmp_path / "user.json"
    path.write_text(json.dumps(user_document))
    return path


@pytest.fixture()
def default_config() -> GeneratorConfig:
    return GeneratorConfig()
