"""ABIVAL - Validators for primitive on-chain value literals."""

__version__ = "0.1.0"
