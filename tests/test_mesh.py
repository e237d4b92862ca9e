from unittest.mock import patch

import pytest

import modelgen.config as config
from modelgen.errors import ApiResponseError
from modelgen.mesh.service import generate_mesh

GLB_BYTES = b"glTF\x02\x00\x00\x00fake-model"


@pytest.fixture
def image_file(output_dir):
    path = output_dir / "gen_a_red_cube.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nfake-image")
    return path


def test_generate_mesh_uploads_image_and_writes_glb(make_response, output_dir, image_file):
    with patch("modelgen.mesh.client.requests.post", return_value=make_response(content=GLB_BYTES)) as post:
        path = generate_mesh(image_file, "a red cube")

    assert path == (output_dir / "gen_a_red_cube.glb").resolve()
    assert path.read_bytes() == GLB_BYTES

    args, kwargs = post.call_args
    assert args[0] == config.MODEL_GENERATION_URL
    assert kwargs["headers"] == {"Authorization": "Bearer test-stability"}
    assert kwargs["data"] == {"texture_resolution": "512", "foreground_ratio": "0.7"}
    name, handle, mime = kwargs["files"]["image"]
    assert name == "gen_a_red_cube.png"
    assert mime == "image/png"
    assert handle.closed


def test_generate_mesh_failure_keeps_image(make_response, output_dir, image_file):
    response = make_response(status_code=500, text="internal error")
    with patch("modelgen.mesh.client.requests.post", return_value=response):
        with pytest.raises(ApiResponseError) as excinfo:
            generate_mesh(image_file, "a red cube")

    assert excinfo.value.status_code == 500
    assert "500" in str(excinfo.value)
    assert image_file.exists()
    assert not (output_dir / "gen_a_red_cube.glb").exists()


def test_generate_mesh_missing_image(output_dir):
    with patch("modelgen.mesh.client.requests.post") as post:
        with pytest.raises(FileNotFoundError):
            generate_mesh(output_dir / "missing.png", "a red cube")

    post.assert_not_called()
