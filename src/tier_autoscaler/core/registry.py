#!/usr/bin/env python3
"""
Decider service contract and the write-once registry binding names to services
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..models import Decision
from .context import DeciderContext
from .exceptions import (
    DeciderConfigurationMismatchError,
    DuplicateDeciderError,
    EmptyDeciderRegistryError,
    UnknownDeciderError,
)
from .logging_config import get_logger

logger = get_logger(__name__)

C = TypeVar("C", bound=BaseModel)


class DeciderService(ABC, Generic[C]):
    """
    Base class for decider strategies

    Subclasses set `name` and `configuration_type`. The configuration type
    must declare the same name as the default of its `decider` field, which
    is what binds a configuration variant to exactly one service.
    """

    name: str
    configuration_type: Type[C]

    @abstractmethod
    def scale(self, configuration: C, context: DeciderContext) -> Decision:
        """
        Propose the capacity required by the tier

        Args:
            configuration: This decider's configuration
            context: Snapshots and current capacity of the tier

        Returns:
            Decision of this decider
        """
        raise NotImplementedError("Subclasses must implement scale() method")


def _configuration_name(service: DeciderService) -> Optional[str]:
    field = service.configuration_type.model_fields.get("decider")
    return field.default if field is not None else None


class DeciderRegistry:
    """Immutable binding of decider names to decider services"""

    def __init__(self, services: Iterable[DeciderService]):
        """
        Initialize registry

        Args:
            services: Decider services to register, at least one

        Raises:
            EmptyDeciderRegistryError: If no service is given
            DuplicateDeciderError: If two services share a name
            DeciderConfigurationMismatchError: If a service's configuration
                type declares another decider name
        """
        by_name: Dict[str, DeciderService] = {}
        for service in services:
            if service.name in by_name:
                raise DuplicateDeciderError(f"Decider '{service.name}' registered twice")
            configuration_name = _configuration_name(service)
            if configuration_name != service.name:
                raise DeciderConfigurationMismatchError(
                    f"Decider '{service.name}' declares configuration for '{configuration_name}'"
                )
            by_name[service.name] = service

        if not by_name:
            raise EmptyDeciderRegistryError("At least one decider service is required")

        self._services = by_name
        logger.info(f"Decider registry initialized with: {self.names()}")

    def __contains__(self, name: str) -> bool:
        return name in self._services

    def __len__(self) -> int:
        return len(self._services)

    def names(self) -> List[str]:
        return sorted(self._services)

    def lookup(self, name: str) -> DeciderService:
        """
        Get the service registered under a name

        Raises:
            UnknownDeciderError: If nothing is registered under the name
        """
        try:
            return self._services[name]
        except KeyError:
            raise UnknownDeciderError(name) from None

    def scale(self, configuration: C, context: DeciderContext) -> Decision:
        """
        Run the decider bound to a configuration

        Args:
            configuration: Decider configuration, its `decider` field selects the service
            context: Decider context of the tier

        Returns:
            Decision of the decider
        """
        service = self.lookup(configuration.decider)
        if not isinstance(configuration, service.configuration_type):
            raise DeciderConfigurationMismatchError(
                f"Decider '{service.name}' does not accept {type(configuration).__name__}"
            )
        return service.scale(configuration, context)
