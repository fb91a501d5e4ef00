"""Error codes, severities and the exception raised by the wallpaper manager."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional


class ErrorCode(IntEnum):
    """Numeric error codes, grouped by subsystem in blocks of ten."""

    SUCCESS = 0
    UNKNOWN = 1
    NOT_IMPLEMENTED = 2
    INVALID_ARGUMENT = 3
    OUT_OF_MEMORY = 4

    FILE_NOT_FOUND = 10
    FILE_READ_ERROR = 11
    FILE_WRITE_ERROR = 12
    INVALID_FORMAT = 13
    PERMISSION_DENIED = 14
    DIRECTORY_NOT_FOUND = 15

    WALLPAPER_NOT_FOUND = 20
    UNSUPPORTED_WALLPAPER_TYPE = 21
    WEB_WALLPAPER_NOT_SUPPORTED = 22
    RENDER_ERROR = 23
    THUMBNAIL_GENERATION_FAILED = 24

    MONITOR_NOT_FOUND = 30
    WAYLAND_CONNECTION_FAILED = 31
    LAYER_SHELL_NOT_SUPPORTED = 32
    NO_DISPLAY_AVAILABLE = 33

    DAEMON_NOT_RUNNING = 40
    DBUS_CONNECTION_FAILED = 41
    DBUS_METHOD_FAILED = 42
    IPC_TIMEOUT = 43

    CONFIG_LOAD_FAILED = 50
    CONFIG_SAVE_FAILED = 51
    CONFIG_INVALID = 52
    PROFILE_NOT_FOUND = 53
    PROFILE_INVALID = 54

    WORKSHOP_API_ERROR = 60
    DOWNLOAD_FAILED = 61
    DOWNLOAD_CANCELLED = 62
    NETWORK_ERROR = 63
    AUTHENTICATION_REQUIRED = 64

    HYPRLAND_NOT_RUNNING = 70
    HYPRLAND_IPC_FAILED = 71
    WORKSPACE_NOT_FOUND = 72

    COLOR_EXTRACTION_FAILED = 80
    THEME_APPLY_FAILED = 81
    THEME_TOOL_NOT_FOUND = 82


class ErrorSeverity(Enum):
    INFO = "INFO"
    WARNING = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"


_MESSAGES: dict[ErrorCode, tuple[str, str]] = {
    ErrorCode.SUCCESS: ("Operation completed successfully", "Done!"),
    ErrorCode.UNKNOWN: (
        "Unknown error occurred",
        "An unexpected error occurred. Please try again.",
    ),
    ErrorCode.NOT_IMPLEMENTED: (
        "Feature not implemented",
        "This feature is not yet available.",
    ),
    ErrorCode.INVALID_ARGUMENT: (
        "Invalid argument provided",
        "Invalid input. Please check your settings.",
    ),
    ErrorCode.OUT_OF_MEMORY: (
        "Out of memory",
        "Not enough memory to complete this operation.",
    ),
    ErrorCode.FILE_NOT_FOUND: ("File not found", "The file could not be found."),
    ErrorCode.FILE_READ_ERROR: (
        "Failed to read file",
        "Could not read the file. It may be corrupted or inaccessible.",
    ),
    ErrorCode.FILE_WRITE_ERROR: (
        "Failed to write file",
        "Could not save the file. Check disk space and permissions.",
    ),
    ErrorCode.INVALID_FORMAT: (
        "Invalid file format",
        "This file format is not supported.",
    ),
    ErrorCode.PERMISSION_DENIED: (
        "Permission denied",
        "You don't have permission to access this file.",
    ),
    ErrorCode.DIRECTORY_NOT_FOUND: (
        "Directory not found",
        "The folder could not be found.",
    ),
    ErrorCode.WALLPAPER_NOT_FOUND: (
        "Wallpaper not found",
        "The wallpaper file could not be found.",
    ),
    ErrorCode.UNSUPPORTED_WALLPAPER_TYPE: (
        "Unsupported wallpaper type",
        "This wallpaper type is not supported.",
    ),
    ErrorCode.WEB_WALLPAPER_NOT_SUPPORTED: (
        "Web wallpapers not supported",
        "Web-based Wallpaper Engine wallpapers are not supported. "
        "Please choose a Scene or Video type wallpaper instead.",
    ),
    ErrorCode.RENDER_ERROR: ("Render error", "Failed to render the wallpaper."),
    ErrorCode.THUMBNAIL_GENERATION_FAILED: (
        "Thumbnail generation failed",
        "Could not create a preview image.",
    ),
    ErrorCode.MONITOR_NOT_FOUND: (
        "Monitor not found",
        "The specified monitor was not found.",
    ),
    ErrorCode.WAYLAND_CONNECTION_FAILED: (
        "Wayland connection failed",
        "Could not connect to Wayland display.",
    ),
    ErrorCode.LAYER_SHELL_NOT_SUPPORTED: (
        "Layer shell not supported",
        "Your compositor does not support wlr-layer-shell.",
    ),
    ErrorCode.NO_DISPLAY_AVAILABLE: (
        "No display available",
        "No display is available.",
    ),
    ErrorCode.DAEMON_NOT_RUNNING: (
        "Daemon not running",
        "BetterWallpaper daemon is not running. Please start it first.",
    ),
    ErrorCode.DBUS_CONNECTION_FAILED: (
        "D-Bus connection failed",
        "Could not connect to the system message bus.",
    ),
    ErrorCode.DBUS_METHOD_FAILED: (
        "D-Bus method call failed",
        "Communication with the daemon failed.",
    ),
    ErrorCode.IPC_TIMEOUT: ("IPC timeout", "The operation timed out."),
    ErrorCode.CONFIG_LOAD_FAILED: (
        "Failed to load configuration",
        "Could not load settings. Using defaults.",
    ),
    ErrorCode.CONFIG_SAVE_FAILED: (
        "Failed to save configuration",
        "Could not save your settings.",
    ),
    ErrorCode.CONFIG_INVALID: (
        "Invalid configuration",
        "The configuration file is corrupted.",
    ),
    ErrorCode.PROFILE_NOT_FOUND: (
        "Profile not found",
        "The specified profile was not found.",
    ),
    ErrorCode.PROFILE_INVALID: (
        "Invalid profile",
        "The profile configuration is invalid.",
    ),
    ErrorCode.WORKSHOP_API_ERROR: (
        "Workshop API error",
        "Could not communicate with Steam Workshop.",
    ),
    ErrorCode.DOWNLOAD_FAILED: (
        "Download failed",
        "The download could not be completed.",
    ),
    ErrorCode.DOWNLOAD_CANCELLED: (
        "Download cancelled",
        "The download was cancelled.",
    ),
    ErrorCode.NETWORK_ERROR: (
        "Network error",
        "A network error occurred. Check your internet connection.",
    ),
    ErrorCode.AUTHENTICATION_REQUIRED: (
        "Authentication required",
        "Please sign in to Steam to access this feature.",
    ),
    ErrorCode.HYPRLAND_NOT_RUNNING: (
        "Hyprland not running",
        "Hyprland is not running or not detected.",
    ),
    ErrorCode.HYPRLAND_IPC_FAILED: (
        "Hyprland IPC failed",
        "Could not communicate with Hyprland.",
    ),
    ErrorCode.WORKSPACE_NOT_FOUND: (
        "Workspace not found",
        "The specified workspace was not found.",
    ),
    ErrorCode.COLOR_EXTRACTION_FAILED: (
        "Color extraction failed",
        "Could not extract colors from the wallpaper.",
    ),
    ErrorCode.THEME_APPLY_FAILED: (
        "Theme apply failed",
        "Could not apply the color theme.",
    ),
    ErrorCode.THEME_TOOL_NOT_FOUND: (
        "Theme tool not found",
        "No compatible theming tool (pywal, matugen) was found.",
    ),
}

_FALLBACK_MESSAGES = ("Unknown error", "An error occurred.")

_SEVERITIES: dict[ErrorCode, ErrorSeverity] = {
    ErrorCode.SUCCESS: ErrorSeverity.INFO,
    ErrorCode.NOT_IMPLEMENTED: ErrorSeverity.WARNING,
    ErrorCode.DOWNLOAD_CANCELLED: ErrorSeverity.WARNING,
    ErrorCode.THUMBNAIL_GENERATION_FAILED: ErrorSeverity.WARNING,
    ErrorCode.OUT_OF_MEMORY: ErrorSeverity.FATAL,
    ErrorCode.WAYLAND_CONNECTION_FAILED: ErrorSeverity.FATAL,
    ErrorCode.LAYER_SHELL_NOT_SUPPORTED: ErrorSeverity.FATAL,
}


def default_messages(code: ErrorCode) -> tuple[str, str]:
    """Technical and user-facing messages for ``code``."""
    return _MESSAGES.get(code, _FALLBACK_MESSAGES)


def default_severity(code: ErrorCode) -> ErrorSeverity:
    """Severity an error of ``code`` carries unless told otherwise."""
    return _SEVERITIES.get(code, ErrorSeverity.ERROR)


class WallpaperError(Exception):
    """An error with a code, a log message, a user message and optional context.

    With only ``code`` (and optionally ``context``) the messages and severity
    come from the defaults, and a non-empty context is appended to the
    message.  Passing ``message`` or ``user_message`` builds a custom error
    whose severity defaults to ``ErrorSeverity.ERROR``.
    """

    def __init__(
        self,
        code: ErrorCode,
        context: Optional[str] = None,
        *,
        message: Optional[str] = None,
        user_message: Optional[str] = None,
        severity: Optional[ErrorSeverity] = None,
    ) -> None:
        self.code = ErrorCode(code)
        default_message, default_user_message = default_messages(self.code)
        self.context = context
        if message is not None or user_message is not None:
            self.message = default_message if message is None else message
            self.user_message = (
                default_user_message if user_message is None else user_message
            )
            self.severity = ErrorSeverity.ERROR if severity is None else severity
        else:
            self.message = default_message
            if context:
                self.message += f": {context}"
            self.user_message = default_user_message
            self.severity = (
                default_severity(self.code) if severity is None else severity
            )
        super().__init__(self.message)

    def describe(self) -> str:
        """Full one-line description for logs."""
        text = f"[{self.severity.value}] ({int(self.code)}) {self.message}"
        if self.context:
            text += f" [Context: {self.context}]"
        return text

    def is_success(self) -> bool:
        return self.code == ErrorCode.SUCCESS

    @classmethod
    def success(cls) -> WallpaperError:
        return cls(ErrorCode.SUCCESS)

    @classmethod
    def file_not_found(cls, path: str) -> WallpaperError:
        return cls(ErrorCode.FILE_NOT_FOUND, str(path))

    @classmethod
    def invalid_format(cls, path: str, expected_format: str) -> WallpaperError:
        return cls(ErrorCode.INVALID_FORMAT, f"{path} (expected: {expected_format})")

    @classmethod
    def web_wallpaper_not_supported(cls, wallpaper_name: str) -> WallpaperError:
        return cls(ErrorCode.WEB_WALLPAPER_NOT_SUPPORTED, wallpaper_name)

    @classmethod
    def monitor_not_found(cls, monitor_name: str) -> WallpaperError:
        return cls(ErrorCode.MONITOR_NOT_FOUND, monitor_name)

    @classmethod
    def daemon_not_running(cls) -> WallpaperError:
        return cls(ErrorCode.DAEMON_NOT_RUNNING)

    @classmethod
    def config_load_failed(cls, path: str, reason: str) -> WallpaperError:
        return cls(ErrorCode.CONFIG_LOAD_FAILED, f"{path}: {reason}")

    @classmethod
    def network_error(cls, url: str, reason: str) -> WallpaperError:
        return cls(ErrorCode.NETWORK_ERROR, f"{url} - {reason}")