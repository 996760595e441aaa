"""PyQt6 user interface for Icon Pane."""
