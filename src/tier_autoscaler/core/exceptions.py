"""
Configuration defects raised by the decision engine

These indicate an inconsistent wiring of policies and deciders, not bad
runtime input, and are never recovered inside the engine.
"""


class AutoscalingConfigurationError(Exception):
    """Base class for decision engine configuration defects"""


class EmptyDeciderRegistryError(AutoscalingConfigurationError):
    """Raised when a decider registry is built without any decider"""


class DuplicateDeciderError(AutoscalingConfigurationError):
    """Raised when a decider name is bound twice"""


class UnknownDeciderError(AutoscalingConfigurationError):
    """Raised when a policy references a decider that is not registered"""

    def __init__(self, names):
        if isinstance(names, str):
            names = [names]
        self.names = sorted(names)
        super().__init__(f"Unknown decider(s): {', '.join(self.names)}")


class DeciderConfigurationMismatchError(AutoscalingConfigurationError):
    """Raised when a configuration is handed to a decider that does not accept it"""
