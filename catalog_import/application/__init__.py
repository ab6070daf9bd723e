"""
Application Layer

Use-case orchestration on top of the content import domain.
"""

from .dependency_container import DependencyContainer, DependencyNotFoundError
from .import_service import ImportService

__all__ = ["DependencyContainer", "DependencyNotFoundError", "ImportService"]
