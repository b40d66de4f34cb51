"""Role managers, matching operators and string helpers for access-control models."""

__version__ = "0.1.0"
__all__ = ["operators", "rbac", "util"]