"""ASTC color endpoint modes and bilinear weight-grid infill."""

__version__ = "0.1.0"
__all__ = ["types", "weight_infill"]