"""
Value records for the ECS resources that get exported.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


def _freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class ServiceRecord:
    """An ECS service as returned by describe_services."""
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "data", _freeze(self.data))

    @property
    def name(self) -> str:
        return self.data["serviceName"]

    @property
    def arn(self) -> Optional[str]:
        return self.data.get("serviceArn")

    @property
    def task_definition(self) -> str:
        """ARN of the task definition the service is currently running."""
        return self.data["taskDefinition"]

    def to_dict(self) -> Dict[str, Any]:
        return _thaw(self.data)


@dataclass(frozen=True)
class TaskDefinitionRecord:
    """An ECS task definition as returned by describe_task_definition."""
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "data", _freeze(self.data))

    @property
    def family(self) -> str:
        return self.data["family"]

    @property
    def revision(self) -> Optional[int]:
        return self.data.get("revision")

    @property
    def arn(self) -> Optional[str]:
        return self.data.get("taskDefinitionArn")

    def to_dict(self) -> Dict[str, Any]:
        return _thaw(self.data)
