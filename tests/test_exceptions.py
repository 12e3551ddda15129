from mirrorstamp.exceptions import InputDecodeError, MirrorStampError, UsageError


def test_message_rendering() -> None:
    err = UsageError("cli.invalid_size", value="12k", reason="not an integer")
    assert str(err) == "invalid size '12k': not an integer"
    assert err.exit_code == 1


def test_unknown_key_falls_back_to_params() -> None:
    err = MirrorStampError("something.else", name="debian")
    assert str(err) == "[something.else] name=debian"


def test_missing_params_render_template() -> None:
    err = InputDecodeError("store.decode_failed")
    assert "failed to decode repository list" in str(err)
