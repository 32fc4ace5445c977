"""
Processors for validating and importing catalog products.
"""

from .validator import RULES, Violation, is_valid, validate_product
from .error_tracker import ErrorTracker

__all__ = ['RULES', 'Violation', 'is_valid', 'validate_product', 'ErrorTracker']
