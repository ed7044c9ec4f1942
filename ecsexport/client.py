"""
Thin wrapper around the boto3 ECS client.
"""

import logging
from typing import Any, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import NotFoundError, ProviderError
from .models import ServiceRecord, TaskDefinitionRecord

logger = logging.getLogger(__name__)


def _provider_error(action: str, error: Exception) -> ProviderError:
    """Translate a botocore exception into a ProviderError."""
    code = None
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code")
    return ProviderError(f"failed to {action}: {error}", code=code)


class ECSClient:
    """Lists and describes ECS services and task definitions."""

    def __init__(self, client: Any = None, region: Optional[str] = None,
                 profile: Optional[str] = None, paginate: bool = False):
        """
        Args:
            client: Pre-built boto3 ECS client; built from a session if omitted
            region: AWS region, defaults to the boto3 discovery chain
            profile: AWS shared-credentials profile
            paginate: Follow nextToken when listing services
        """
        self.paginate = paginate
        if client is not None:
            self.client = client
            return

        try:
            session = boto3.Session(profile_name=profile, region_name=region)
            self.client = session.client("ecs")
        except BotoCoreError as e:
            raise _provider_error("create ECS client", e) from e

    def list_services(self, cluster: str) -> List[str]:
        """
        List the ARNs of the services in a cluster.

        Only the first page is returned unless the client was created with
        paginate=True.
        """
        logger.debug(f"Listing services in cluster {cluster}")
        try:
            if self.paginate:
                arns: List[str] = []
                paginator = self.client.get_paginator("list_services")
                for page in paginator.paginate(cluster=cluster):
                    arns.extend(page.get("serviceArns", []))
                return arns

            response = self.client.list_services(cluster=cluster)
        except (ClientError, BotoCoreError) as e:
            raise _provider_error(f"list services in cluster {cluster}", e) from e

        return list(response.get("serviceArns", []))

    def describe_service(self, cluster: str, service: str) -> ServiceRecord:
        """
        Describe one service, including its tags.

        Raises:
            NotFoundError: If ECS reports no matching service
            ProviderError: If the call fails
        """
        logger.debug(f"Describing service {service}")
        try:
            response = self.client.describe_services(
                cluster=cluster,
                services=[service],
                include=["TAGS"],
            )
        except (ClientError, BotoCoreError) as e:
            raise _provider_error(f"describe service {service}", e) from e

        services = response.get("services", [])
        if not services:
            raise NotFoundError(f"service {service} not found")
        return ServiceRecord(services[0])

    def describe_task_definition(self, task_definition: str) -> TaskDefinitionRecord:
        """Describe a task definition by family:revision or ARN."""
        logger.debug(f"Describing task definition {task_definition}")
        try:
            response = self.client.describe_task_definition(
                taskDefinition=task_definition,
                include=["TAGS"],
            )
        except (ClientError, BotoCoreError) as e:
            raise _provider_error(f"describe task definition {task_definition}", e) from e

        return TaskDefinitionRecord(response["taskDefinition"])
