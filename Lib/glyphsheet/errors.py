class Error(Exception):
    """Base for glyphsheet errors."""


class FontInitError(Error):
    """The font cannot be prepared for codepoint enumeration."""


class FontLoadError(Error):
    """The font file is missing, unreadable or cannot be parsed."""


class DocumentCreateError(Error):
    """The output document could not be created."""


class FontEmbedError(Error):
    """The font could not be embedded into the output document."""


class ConfigError(Error):
    """Exception used when configuration is invalid."""
