"""Services coordinating the refinance calculation engine."""

from .comparison_service import ComparisonService

__all__ = ["ComparisonService"]
