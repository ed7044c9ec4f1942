"""
Shared fixtures: canned ECS API responses.
"""

from datetime import datetime, timezone

import pytest
from unittest.mock import MagicMock


def service_payload(name: str, task_definition: str) -> dict:
    return {
        "serviceArn": f"arn:aws:ecs:us-west-2:123456789012:service/prod/{name}",
        "serviceName": name,
        "clusterArn": "arn:aws:ecs:us-west-2:123456789012:cluster/prod",
        "loadBalancers": [
            {"targetGroupArn": "arn:aws:elasticloadbalancing:tg/web", "containerName": name, "containerPort": 80}
        ],
        "status": "ACTIVE",
        "desiredCount": 2,
        "runningCount": 2,
        "pendingCount": 1,
        "launchType": "FARGATE",
        "taskDefinition": f"arn:aws:ecs:us-west-2:123456789012:task-definition/{task_definition}",
        "deploymentConfiguration": {"maximumPercent": 200, "minimumHealthyPercent": 100},
        "deployments": [{"id": "ecs-svc/1", "status": "PRIMARY"}],
        "events": [{"id": "e-1", "message": "has reached a steady state."}],
        "taskSets": [],
        "createdAt": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        "createdBy": "arn:aws:iam::123456789012:role/admin",
        "tags": [{"key": "team", "value": "platform"}],
    }


def task_definition_payload(family: str, revision: int) -> dict:
    return {
        "taskDefinitionArn": f"arn:aws:ecs:us-west-2:123456789012:task-definition/{family}:{revision}",
        "family": family,
        "revision": revision,
        "containerDefinitions": [
            {"name": family, "image": f"example/{family}:latest", "cpu": 256, "memory": 512, "essential": True}
        ],
        "status": "ACTIVE",
        "requiresCompatibilities": ["FARGATE"],
        "cpu": "256",
        "memory": "512",
        "registeredAt": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "registeredBy": "arn:aws:iam::123456789012:role/admin",
        "deregisteredAt": datetime(2024, 2, 1, tzinfo=timezone.utc),
    }


@pytest.fixture
def prod_cluster():
    """Mock boto3 ECS client for cluster prod with services web (web:12) and worker (worker:4)."""
    known_services = {
        "web": service_payload("web", "web:12"),
        "worker": service_payload("worker", "worker:4"),
    }
    known_task_definitions = {
        "web:12": task_definition_payload("web", 12),
        "worker:4": task_definition_payload("worker", 4),
    }

    def describe_services(cluster, services, include):
        name = services[0].rsplit("/", 1)[-1]
        found = [known_services[name]] if name in known_services else []
        return {"services": found, "failures": []}

    def describe_task_definition(taskDefinition, include):
        key = taskDefinition.rsplit("/", 1)[-1]
        return {"taskDefinition": known_task_definitions[key], "tags": []}

    client = MagicMock()
    client.list_services.return_value = {
        "serviceArns": [s["serviceArn"] for s in known_services.values()]
    }
    client.describe_services.side_effect = describe_services
    client.describe_task_definition.side_effect = describe_task_definition
    return client
