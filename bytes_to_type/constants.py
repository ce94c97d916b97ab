"""Package-wide constants for bytes-to-type."""

VERSION = "0.1.0"
