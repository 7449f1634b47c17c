"""Sheet configuration.

A config file is a YAML mapping holding any subset of the SheetConfig fields:

    page_words: 300
    line_words: 15
    page_size: letter
    compress: false
"""
from dataclasses import dataclass, fields, replace

import yaml
from reportlab.lib import pagesizes

from glyphsheet.errors import ConfigError

PAGE_SIZES = {
    "A4": pagesizes.A4,
    "letter": pagesizes.letter,
    "legal": pagesizes.legal,
}


@dataclass(frozen=True)
class SheetConfig:
    page_words: int = 300
    line_words: int = 15
    page_size: str = "A4"
    x_position: float = 50
    line_spacing: float = 1.5
    compress: bool = True
    font_number: int = 0

    @property
    def page_lines(self):
        return self.page_words // self.line_words

    @property
    def page_dimensions(self):
        return PAGE_SIZES[self.page_size]

    def validate(self):
        if self.line_words < 1:
            raise ConfigError(f"line_words must be at least 1, got {self.line_words}")
        if self.page_words < self.line_words:
            raise ConfigError(
                f"page_words ({self.page_words}) must be at least "
                f"line_words ({self.line_words})"
            )
        if self.page_size not in PAGE_SIZES:
            raise ConfigError(
                f"Unknown page_size '{self.page_size}'. "
                f"Choose from {', '.join(PAGE_SIZES)}"
            )
        if self.line_spacing <= 0:
            raise ConfigError(f"line_spacing must be positive, got {self.line_spacing}")
        if self.font_number < 0:
            raise ConfigError(f"font_number must not be negative, got {self.font_number}")
        return self

    def updated(self, **overrides):
        """Return a copy with every override that is not None applied."""
        return replace(
            self, **{k: v for k, v in overrides.items() if v is not None}
        ).validate()


def loads(string):
    config = yaml.safe_load(string)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError("Config must be a mapping of option names to values")
    known = {f.name: f.type for f in fields(SheetConfig)}
    unknown = sorted(set(config) - set(known))
    if unknown:
        raise ConfigError(f"Unknown config options: {', '.join(map(str, unknown))}")
    for key, value in config.items():
        expected = known[key]
        # bool is an int subclass; reject it where a number is expected
        if expected in (int, float) and isinstance(value, bool):
            raise ConfigError(f"{key} must be a number, got {value!r}")
        if expected is float and isinstance(value, int):
            continue
        if not isinstance(value, expected):
            raise ConfigError(
                f"{key} must be of type {expected.__name__}, got {value!r}"
            )
    return config


def load_config(fp, base=None):
    """Read a YAML config file and merge it over base (or the defaults)."""
    try:
        with open(fp, encoding="utf-8") as doc:
            options = loads(doc.read())
    except OSError as e:
        raise ConfigError(f"Cannot read config file {fp}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse config file {fp}: {e}") from e
    return replace(base or SheetConfig(), **options).validate()
