"""podclaim: resolve pod resource claims to container devices."""

__version__ = "0.1.0"
