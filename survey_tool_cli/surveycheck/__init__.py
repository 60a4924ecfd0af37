"""Survey Tool CLI: checks Survey Tool configuration files and host prerequisites."""

__version__ = "0.3.0"
