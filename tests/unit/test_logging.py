from shared.infrastructure.observability.logger import redact_sensitive


def test_redacts_credential_material():
    event = redact_sensitive(
        None,
        "info",
        {"event": "password_changed", "user_id": "u1", "new_password": "Newpass99", "salt": b"x"},
    )

    assert event["new_password"] == "[REDACTED]"
    assert event["salt"] == "[REDACTED]"
    assert event["user_id"] == "u1"
