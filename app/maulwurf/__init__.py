"""maulwurf - backend state and I/O layer for the Maulwurf G-code editor shell.

Provides directory listing for the file browser, the persisted user
settings, and the bounded diagnostic log shown in the debug console.
"""

__version__ = "0.1.0"
