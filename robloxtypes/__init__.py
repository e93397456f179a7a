"""Value types for Roblox instances, with JSON forms and the binary attribute format."""

__version__ = "0.1.0"