"""Constants for the Icon Pane GUI."""

WINDOW_MIN_WIDTH = 420
WINDOW_MIN_HEIGHT = 480
WINDOW_DEFAULT_WIDTH = 560
WINDOW_DEFAULT_HEIGHT = 720

GRID_COLUMNS = 6
ICON_BUTTON_SIZE = 56
ICON_FONT_PIXEL_SIZE = 28

# Theme class applied by the icon set -> icon font family that renders it
THEME_FONT_FAMILIES = {
    "mat-fill": "Material Icons",
    "mat-outlined": "Material Icons Outlined",
    "mat-round": "Material Icons Round",
    "mat-sharp": "Material Icons Sharp",
    "mat-two-tone": "Material Icons Two Tone",
}

LOADING_TEXT = "Loading icons..."
LOAD_FAILED_TEXT = "Icons could not be loaded."

STATUS_MESSAGE_TIMEOUT_MS = 5000
WORKER_SHUTDOWN_TIMEOUT_MS = 2000
