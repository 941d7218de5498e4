"""Resource model, indexers, converters and reconciliation helpers for bare-metal provisioning."""

__version__ = "0.1.0"

__all__ = [
    "meta",
    "hardware",
    "template",
    "workflow",
    "indexers",
    "reconcile",
    "convert",
    "hardware_json",
]