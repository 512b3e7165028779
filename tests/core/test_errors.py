from shellbox.core.errors import (EscalationFailure, NotFoundError, ParseError, ShellboxError,
                                 SignalPermissionError)


def test_parse_error_keeps_input_and_cause():
    error = ParseError("http://[", "Invalid IPv6 URL")
    assert error.input == "http://["
    assert error.cause == "Invalid IPv6 URL"
    assert error.describe().startswith("parseurl failed:")
    assert "http://[" in str(error)


def test_process_errors_name_the_target():
    assert "firefox" in NotFoundError("firefox").describe()
    failure = EscalationFailure("firefox", [12, 13])
    assert failure.survivors == [12, 13]
    assert failure.describe().startswith("murder failed:")


def test_signal_permission_error_is_a_permission_error():
    error = SignalPermissionError("sshd", 1)
    assert isinstance(error, PermissionError)
    assert isinstance(error, ShellboxError)
    assert "pid 1" in str(error)
