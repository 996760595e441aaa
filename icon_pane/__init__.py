"""
Icon Pane - Icon catalog browser and inserter

Browse a catalog of icons grouped by category, tune per-set rendering
options (color, theme) and insert the rendered icon into a host document.
"""

__version__ = "1.0.0"
__author__ = "Icon Pane Contributors"
