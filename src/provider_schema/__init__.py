"""Provider schema service: serves the JSON Schema for provider selection config."""

__version__ = "0.1.0"
