"""
Models for batchprocessing
"""

from .base_model import Record
from .person import Person
