"""
Runtime configuration for an export run.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "ECSEXPORT_"

_TRUTHY = {"1", "true", "yes", "on"}


def _env(name: str) -> Optional[str]:
    value = os.environ.get(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass
class ExportConfig:
    """Settings for one export of one cluster."""
    cluster: str
    outdir: Path
    region: Optional[str] = None  # None defers to the boto3 discovery chain
    profile: Optional[str] = None
    paginate: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.cluster:
            raise ValueError("cluster must not be empty")
        if not str(self.outdir):
            raise ValueError("outdir must not be empty")
        self.outdir = Path(self.outdir)
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(
        cls,
        cluster: str,
        outdir: str,
        region: Optional[str] = None,
        profile: Optional[str] = None,
        paginate: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> "ExportConfig":
        """
        Build a config, filling unset values from ECSEXPORT_* variables.

        Args:
            cluster: Name or ARN of the ECS cluster
            outdir: Root directory for the exported files
            region: AWS region override (ECSEXPORT_REGION)
            profile: AWS profile override (ECSEXPORT_PROFILE)
            paginate: Collect every page of list_services (ECSEXPORT_PAGINATE)
            log_level: Logging level name (ECSEXPORT_LOG_LEVEL)

        Returns:
            ExportConfig

        Raises:
            ValueError: If cluster or outdir is empty, or the level is unknown
        """
        if paginate is None:
            paginate = (_env("PAGINATE") or "").lower() in _TRUTHY

        return cls(
            cluster=cluster,
            outdir=outdir,
            region=region or _env("REGION"),
            profile=profile or _env("PROFILE"),
            paginate=paginate,
            log_level=log_level or _env("LOG_LEVEL") or "WARNING",
        )
