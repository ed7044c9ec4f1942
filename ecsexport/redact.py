"""
Removal of server-assigned and runtime fields before export.
"""

from typing import Any, Dict, Tuple

from .models import ServiceRecord, TaskDefinitionRecord

SERVICE_CLEARED_FIELDS: Tuple[str, ...] = (
    "createdAt",
    "createdBy",
    "deployments",
    "events",
    "loadBalancers",
    "taskSets",
    "status",
)
SERVICE_ZEROED_FIELDS: Tuple[str, ...] = ("runningCount", "pendingCount")

# status is intentionally kept
TASK_DEFINITION_CLEARED_FIELDS: Tuple[str, ...] = (
    "deregisteredAt",
    "registeredAt",
    "registeredBy",
)


def _without(data: Dict[str, Any], keys: Tuple[str, ...]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k not in keys}


def redact_service(service: ServiceRecord) -> ServiceRecord:
    """Return a copy of the service without its mutable runtime state."""
    data = _without(service.to_dict(), SERVICE_CLEARED_FIELDS)
    for key in SERVICE_ZEROED_FIELDS:
        data[key] = 0
    return ServiceRecord(data)


def redact_task_definition(task_definition: TaskDefinitionRecord) -> TaskDefinitionRecord:
    """Return a copy of the task definition without registration metadata."""
    return TaskDefinitionRecord(_without(task_definition.to_dict(), TASK_DEFINITION_CLEARED_FIELDS))
