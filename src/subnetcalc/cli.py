"""
subnetcalc command-line interface.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import click

from subnetcalc import __version__
from subnetcalc.config import get_config
from subnetcalc.ip.cli import ip
from subnetcalc.logging_config import configure_logging


@click.group()
@click.version_option(__version__, prog_name="subnetcalc")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also log to this file")
def main(debug: bool, log_file: str | None):
    """IPv4/IPv6 subnet calculator."""
    config = get_config()
    configure_logging(debug=debug, log_file=log_file, level=config.log_level)


main.add_command(ip)


if __name__ == "__main__":
    main()
