"""
String utility package for PGN tag normalization.
"""

from .name_utils import NameUtils
from .text_utils import TextUtils

__all__ = ['NameUtils', 'TextUtils']
