import pytest

from betterwall.errors import (
    ErrorCode,
    ErrorSeverity,
    WallpaperError,
    default_messages,
    default_severity,
)


def test_code_values_follow_groups():
    assert WallpaperError(ErrorCode.SUCCESS).describe().startswith("[INFO] (0) ")
    assert WallpaperError(ErrorCode.FILE_NOT_FOUND).describe().startswith("[ERROR] (10) ")
    assert WallpaperError(ErrorCode.THEME_TOOL_NOT_FOUND).describe().startswith(
        "[ERROR] (82) "
    )


def test_every_code_has_nonempty_messages():
    for code in ErrorCode:
        message, user_message = default_messages(code)
        assert message and user_message
        assert (message, user_message) != ("Unknown error", "An error occurred.")


def test_default_severities():
    assert default_severity(ErrorCode.SUCCESS) is ErrorSeverity.INFO
    assert default_severity(ErrorCode.DOWNLOAD_CANCELLED) is ErrorSeverity.WARNING
    assert default_severity(ErrorCode.OUT_OF_MEMORY) is ErrorSeverity.FATAL
    assert default_severity(ErrorCode.NETWORK_ERROR) is ErrorSeverity.ERROR


def test_code_only_uses_defaults():
    err = WallpaperError(ErrorCode.DAEMON_NOT_RUNNING)
    assert err.message == "Daemon not running"
    assert err.user_message == (
        "BetterWallpaper daemon is not running. Please start it first."
    )
    assert err.context is None
    assert err.describe() == "[ERROR] (40) Daemon not running"


def test_context_is_appended():
    err = WallpaperError.file_not_found("/tmp/a.png")
    assert err.code is ErrorCode.FILE_NOT_FOUND
    assert err.message == "File not found: /tmp/a.png"
    assert str(err) == err.message
    assert err.describe() == (
        "[ERROR] (10) File not found: /tmp/a.png [Context: /tmp/a.png]"
    )


def test_empty_context_not_appended():
    err = WallpaperError(ErrorCode.RENDER_ERROR, "")
    assert err.message == "Render error"
    assert "[Context" not in err.describe()


def test_factory_contexts():
    assert WallpaperError.invalid_format("x.png", "PNG").context == "x.png (expected: PNG)"
    assert WallpaperError.config_load_failed("cfg.json", "bad").context == "cfg.json: bad"
    assert WallpaperError.network_error("http://localhost", "timeout").context == (
        "http://localhost - timeout"
    )
    assert WallpaperError.monitor_not_found("DP-1").message == "Monitor not found: DP-1"
    assert WallpaperError.web_wallpaper_not_supported("w").code is (
        ErrorCode.WEB_WALLPAPER_NOT_SUPPORTED
    )


def test_severity_prefixes():
    fatal = WallpaperError(ErrorCode.WAYLAND_CONNECTION_FAILED)
    assert fatal.describe().startswith("[FATAL] (31) ")
    warn = WallpaperError(ErrorCode.NOT_IMPLEMENTED)
    assert warn.describe().startswith("[WARN] (2) ")


def test_success():
    ok = WallpaperError.success()
    assert ok.is_success()
    assert ok.describe() == "[INFO] (0) Operation completed successfully"
    assert not WallpaperError.daemon_not_running().is_success()


def test_custom_error_defaults_to_error_severity():
    err = WallpaperError(
        ErrorCode.OUT_OF_MEMORY, message="tech detail", user_message="friendly"
    )
    assert err.severity is ErrorSeverity.ERROR
    assert err.message == "tech detail"
    assert err.user_message == "friendly"
    assert err.describe() == "[ERROR] (4) tech detail"


def test_custom_severity():
    err = WallpaperError(
        ErrorCode.UNKNOWN,
        message="m",
        user_message="u",
        severity=ErrorSeverity.WARNING,
    )
    assert err.severity is ErrorSeverity.WARNING


def test_can_be_raised():
    err = WallpaperError.monitor_not_found("HDMI-A-1")
    assert err.code is ErrorCode.MONITOR_NOT_FOUND
    assert err.context == "HDMI-A-1"
    assert err.describe() == (
        "[ERROR] (30) Monitor not found: HDMI-A-1 [Context: HDMI-A-1]"
    )
    with pytest.raises(WallpaperError, match="Monitor not found: HDMI-A-1") as info:
        raise err
    assert info.value is err
    assert str(info.value) == "Monitor not found: HDMI-A-1"