from unittest.mock import patch

import pytest

import modelgen.config as config
from modelgen.errors import ApiResponseError
from modelgen.image.service import generate_image

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


def test_generate_image_writes_png(make_response, output_dir):
    with patch("modelgen.image.client.requests.post", return_value=make_response(content=PNG_BYTES)) as post:
        path = generate_image("a red cube")

    assert path == (output_dir / "gen_a_red_cube.png").resolve()
    assert path.read_bytes() == PNG_BYTES

    args, kwargs = post.call_args
    assert args[0] == config.IMAGE_GENERATION_URL
    assert kwargs["headers"] == {"Authorization": "Bearer test-stability", "Accept": "image/*"}
    assert kwargs["files"] == {"prompt": (None, "a red cube"), "output_format": (None, "png")}


def test_generate_image_sends_image_prompt_but_names_after_prompt(make_response, output_dir):
    with patch("modelgen.image.client.requests.post", return_value=make_response(content=PNG_BYTES)) as post:
        path = generate_image("a red cube", image_prompt="A glossy red cube, studio lighting")

    assert path.name == "gen_a_red_cube.png"
    assert post.call_args.kwargs["files"]["prompt"] == (None, "A glossy red cube, studio lighting")


def test_generate_image_optional_dimensions(make_response, output_dir, monkeypatch):
    monkeypatch.setattr(config, "IMAGE_WIDTH", 1024)
    monkeypatch.setattr(config, "IMAGE_HEIGHT", 768)

    with patch("modelgen.image.client.requests.post", return_value=make_response(content=PNG_BYTES)) as post:
        generate_image("a red cube")

    files = post.call_args.kwargs["files"]
    assert files["width"] == (None, "1024")
    assert files["height"] == (None, "768")


def test_generate_image_non_200_writes_nothing(make_response, output_dir):
    response = make_response(status_code=400, text='{"errors": ["prompt is required"]}')
    with patch("modelgen.image.client.requests.post", return_value=response):
        with pytest.raises(ApiResponseError) as excinfo:
            generate_image("a red cube")

    assert excinfo.value.status_code == 400
    assert "prompt is required" in str(excinfo.value)
    assert list(output_dir.iterdir()) == []


def test_generate_image_overwrites_previous_output(make_response, output_dir):
    with patch("modelgen.image.client.requests.post", return_value=make_response(content=b"first")):
        generate_image("a red cube")
    with patch("modelgen.image.client.requests.post", return_value=make_response(content=b"second")):
        path = generate_image("a red cube")

    assert path.read_bytes() == b"second"
    assert len(list(output_dir.iterdir())) == 1


def test_generate_image_sends_empty_image_prompt_unchanged(make_response, output_dir):
    with patch("modelgen.image.client.requests.post", return_value=make_response(content=PNG_BYTES)) as post:
        generate_image("a red cube", image_prompt="")

    assert post.call_args.kwargs["files"]["prompt"] == (None, "")
