"""A joystick-driven menu and car game on a simulated 128x64 monochrome OLED."""

__version__ = "0.1.1"
__all__ = ["__version__"]