"""Allow running with ``python -m icon_pane``."""

from icon_pane.gui.app import main

if __name__ == "__main__":
    main()
