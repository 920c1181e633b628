"""
Services Package

Exports all services for easy importing.
"""

from aisolutions.services.storage import TableStore, StorageError
from aisolutions.services.text import slugify, split_csv, join_csv
from aisolutions.services.resources import ResourceManager, TableDescriptor, ValidationError, apply_filters, MATCH_ALL
from aisolutions.services.session_gate import SessionGate, AdminIdentity, AdminAuthenticator, STORAGE_KEY
from aisolutions.services.descriptors import DESCRIPTORS, get_descriptor

__all__ = [
    'TableStore',
    'StorageError',
    'slugify',
    'split_csv',
    'join_csv',
    'ResourceManager',
    'TableDescriptor',
    'ValidationError',
    'apply_filters',
    'MATCH_ALL',
    'SessionGate',
    'AdminIdentity',
    'AdminAuthenticator',
    'STORAGE_KEY',
    'DESCRIPTORS',
    'get_descriptor',
]
