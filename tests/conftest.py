from unittest.mock import MagicMock

import pytest

import modelgen.config as config


def _make_response(status_code=200, json_data=None, content=b"", text=""):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture(autouse=True)
def api_keys(monkeypatch):
    # Keep tests independent of any local .env or credentials file.
    monkeypatch.setenv("OPENAI_API_KEY", "test-openai")
    monkeypatch.setenv("STABILITY_API_KEY", "test-stability")


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    out = tmp_path / "out"
    out.mkdir()
    monkeypatch.setattr(config, "OUTPUT_DIR", str(out))
    return out
