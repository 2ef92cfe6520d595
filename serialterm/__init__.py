"""SerialTerm: send and receive frames over an RS-232/UART link."""

from serialterm.config import APP_NAME, VERSION

__version__ = "0.7.0"

__all__ = ["APP_NAME", "VERSION", "__version__"]
