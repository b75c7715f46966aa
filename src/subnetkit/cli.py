"""
SubnetKit command line entry point.
"""

import click

from subnetkit import __version__
from subnetkit.config import get_config
from subnetkit.logging_config import setup_logging
from subnetkit.ip.cli import ip


@click.group()
@click.version_option(__version__, prog_name="subnetkit")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
def main(debug: bool, log_file: str | None):
    """IP address classification and subnet calculator."""
    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from None

    setup_logging(
        level="DEBUG" if debug else config.log_level,
        log_file=log_file or config.log_file,
    )


main.add_command(ip)


if __name__ == "__main__":
    main()
