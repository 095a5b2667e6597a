"""
Service layer.

Reusable service base classes shared by the composers.
"""

from .enum_dispatch_service import EnumDispatchService

__all__ = ["EnumDispatchService"]
