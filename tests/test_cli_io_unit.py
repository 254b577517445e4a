import json

from core import DuplicateTagError, FieldValidationError
from interface.cli_io import describe_failure, envelope, plain_response, structured_error, structured_response


def test_envelope_shape():
    body = envelope("list", "Listed", payload={"total": 0}, summary="0 persons")
    assert body["status"] == "OK"
    assert body["payload"] == {"total": 0}
    assert body["summary"] == "0 persons"
    assert body["timestamp"].endswith("+00:00")

    assert "summary" not in envelope("edit", "failed", ok=False)
    assert envelope("edit", "failed", ok=False)["status"] == "ERROR"


def test_structured_response_and_error_exit_codes(capsys):
    assert structured_response("config", message="Configuration", payload={"log_level": "INFO"}) == 0
    assert json.loads(capsys.readouterr().out)["payload"] == {"log_level": "INFO"}

    assert structured_error("edit", "invalid_field", "bad email", field="email") == 1
    out = json.loads(capsys.readouterr().out)
    assert out["payload"] == {"code": "invalid_field", "field": "email"}
    assert out["message"] == "bad email"


def test_describe_failure_codes():
    assert describe_failure(DuplicateTagError()) == ("duplicate_tag", "This tag already exists for the person.", {})
    assert describe_failure(FieldValidationError("phone", "too short")) == ("invalid_field", "too short", {"field": "phone"})
    code, message, details = describe_failure(PermissionError("read-only"))
    assert code == "storage_error"
    assert "read-only" in message
    assert describe_failure(ValueError("no keywords"))[0] == "invalid_argument"


def test_plain_response_prints_body(capsys):
    assert plain_response("Error: nope", exit_code=1) == 1
    assert plain_response("Listed", "table") == 0
    assert capsys.readouterr().out == "Error: nope\nListed\ntable\n"
