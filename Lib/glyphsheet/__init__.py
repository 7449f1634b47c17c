"""Render a PDF reference sheet of every character a font supports."""
from glyphsheet._version import version as __version__
