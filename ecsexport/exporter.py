"""
Export orchestration: list, describe, redact and write every service.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Union

import click

from .client import ECSClient
from .errors import OutputError
from .models import ServiceRecord, TaskDefinitionRecord
from .redact import redact_service, redact_task_definition
from .serialize import make_dir, write_record

logger = logging.getLogger(__name__)

SERVICE_FILE = "servicedef.yaml"
TASK_DEFINITION_FILE = "taskdef.yaml"


@dataclass
class ExportSummary:
    """Result of a successful run."""
    cluster: str
    outdir: Path
    exported: List[str] = field(default_factory=list)


class Exporter:
    """Exports every service of a cluster under one output directory."""

    def __init__(self, client: ECSClient, outdir: Union[str, Path],
                 echo: Callable[[str], None] = click.echo):
        self.client = client
        self.outdir = Path(outdir)
        self.echo = echo

    def run(self, cluster: str) -> ExportSummary:
        """
        Export all services in the cluster.

        Stops at the first error; anything already written stays on disk.

        Args:
            cluster: Name or ARN of the ECS cluster

        Returns:
            ExportSummary with the names of the exported services

        Raises:
            ExportError: On any provider, serialization or filesystem failure
        """
        self._ensure_outdir()

        service_arns = self.client.list_services(cluster)
        self.echo(f"Found {len(service_arns)} services")
        logger.info(f"Exporting {len(service_arns)} services from cluster {cluster}")

        summary = ExportSummary(cluster=cluster, outdir=self.outdir)
        for i, service_arn in enumerate(service_arns, start=1):
            service = self.client.describe_service(cluster, service_arn)
            task_definition = self.client.describe_task_definition(service.task_definition)

            service = redact_service(service)
            task_definition = redact_task_definition(task_definition)

            self.export(service, task_definition)

            summary.exported.append(service.name)
            self.echo(f" {i}. Export succeeded: {service.name}")

        self.echo("Successfully finished exporting.")
        return summary

    def export(self, service: ServiceRecord, task_definition: TaskDefinitionRecord) -> Path:
        """
        Write {outdir}/{serviceName}/servicedef.yaml and taskdef.yaml.

        The service directory must not exist yet.
        """
        target = self.outdir / service.name
        make_dir(target)

        write_record(target / SERVICE_FILE, service, f"service {service.name}")
        write_record(target / TASK_DEFINITION_FILE, task_definition,
                     f"taskDefinition {task_definition.family}")
        return target

    def _ensure_outdir(self) -> None:
        if self.outdir.is_dir():
            return
        if self.outdir.exists():
            raise OutputError(f"{self.outdir} exists and is not a directory")

        make_dir(self.outdir)
        self.echo(f"Created a directory {self.outdir}")
