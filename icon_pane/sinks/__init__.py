"""Insertion sinks that do not depend on a UI toolkit."""

from .svg_file_sink import SvgFileSink

__all__ = ["SvgFileSink"]
