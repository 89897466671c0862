"""
Shared column helpers
"""
import uuid


def new_object_id() -> str:
    """Storage-assigned identifier for a new document"""
    return uuid.uuid4().hex
