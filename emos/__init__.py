"""Boot-stage console output: teletype writing and printf-style formatting."""

__version__ = "0.1.0"
__all__ = ["x86", "stdio", "main"]