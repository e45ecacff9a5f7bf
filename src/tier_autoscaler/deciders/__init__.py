"""
Built-in decider services
"""

from typing import List

from ..core.registry import DeciderService
from .fixed import FixedDeciderService
from .reactive_storage import ReactiveStorageDeciderService


def default_decider_services() -> List[DeciderService]:
    """Decider services that are always registered"""
    return [FixedDeciderService(), ReactiveStorageDeciderService()]


__all__ = [
    "FixedDeciderService",
    "ReactiveStorageDeciderService",
    "default_decider_services",
]
