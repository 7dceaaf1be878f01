"""
Contains utility functions used by the validation framework
"""
from .query_object import required_field
