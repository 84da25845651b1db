"""Response Envelope — one shape, success derived from status."""

from blog_api.schemas.envelope import ApiResponse


def test_ok_defaults_to_200_success():
    resp = ApiResponse.ok(message="done", data={"x": 1})
    assert resp.status == 200
    assert resp.success is True
    assert resp.message == "done"
    assert resp.data == {"x": 1}


def test_ok_with_created_status():
    resp = ApiResponse.ok(message="created", status=201)
    assert resp.status == 201
    assert resp.success is True
    assert resp.data is None


def test_error_status_is_not_success():
    assert ApiResponse.ok(message="bad", status=404).success is False


def test_envelope_keys():
    assert set(ApiResponse.ok(message="m").model_dump()) == {
        "status", "success", "message", "data",
    }
