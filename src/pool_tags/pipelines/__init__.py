from .tagging import transform, truncate, rejection_reasons

__all__ = ["transform", "truncate", "rejection_reasons"]
