"""
Click command line entrypoint for ecsexport.
"""

import logging
import sys
from typing import Optional

import click

from .client import ECSClient
from .config import ExportConfig
from .exporter import Exporter

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


class ExportCommand(click.Command):
    """Reports usage errors the same way as export failures: on stdout, exit code 1."""

    def main(self, args=None, prog_name=None, complete_var=None, standalone_mode=True, **extra):
        try:
            return super().main(
                args=args,
                prog_name=prog_name,
                complete_var=complete_var,
                standalone_mode=False,
                **extra,
            )
        except click.ClickException as e:
            click.echo(f"Error: {e.format_message()}")
            sys.exit(1)
        except click.Abort:
            click.echo("Error: Aborted!")
            sys.exit(1)


@click.command(cls=ExportCommand)
@click.option("--cluster", required=True, help="The name of the ECS cluster to list services (required)")
@click.option("--outdir", required=True, help="The root directory for output files (required)")
@click.option("--region", help="AWS region (defaults to the AWS SDK configuration)")
@click.option("--profile", help="AWS profile name")
@click.option("--paginate", is_flag=True, help="Follow every page when listing services")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(cluster: str, outdir: str, region: Optional[str], profile: Optional[str],
         paginate: bool, verbose: bool):
    """
    Fetch configs of services and taskDefinitions from AWS and export them as yaml files.
    """
    try:
        config = ExportConfig.from_env(
            cluster=cluster,
            outdir=outdir,
            region=region,
            profile=profile,
            paginate=True if paginate else None,
            log_level="DEBUG" if verbose else None,
        )
        _setup_logging(config.log_level)
        logger.debug(f"Running with {config}")

        client = ECSClient(region=config.region, profile=config.profile, paginate=config.paginate)
        Exporter(client, config.outdir).run(config.cluster)
    except Exception as e:
        logger.debug("Export failed", exc_info=True)
        click.echo(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
