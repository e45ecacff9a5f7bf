"""
Read-only mapping fields for frozen models

`frozen` only blocks reassigning a field, so mapping fields are stored as
`MappingProxyType` views and dumped back to plain dicts.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, TypeVar

from pydantic import AfterValidator, WrapSerializer

K = TypeVar("K")
V = TypeVar("V")


def freeze_mapping(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


def empty_mapping() -> Mapping:
    return MappingProxyType({})


def _thaw_mapping(value: Mapping, handler) -> Dict[Any, Any]:
    return handler(dict(value))


FrozenMapping = Annotated[
    Dict[K, V],
    AfterValidator(freeze_mapping),
    WrapSerializer(_thaw_mapping)
]
