"""notekit: typed field/value engine for label-driven note collections."""

__version__ = "0.1.0"
