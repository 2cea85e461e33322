"""
IP/CIDR CLI commands.
"""

import json

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from subnetcalc.config import get_config
from subnetcalc.ip.codec import compress_ipv6, expand_ipv6
from subnetcalc.ip.core import (
    EnumerationResult,
    ShiftDirection,
    check_contains,
    evaluate,
    list_subnets,
    shift as shift_network,
)
from subnetcalc.ip.errors import SubnetError
from subnetcalc.ip.formatting import (
    OutputFormat,
    calculation_sections,
    format_info,
    format_subnet_list,
    subnet_list_title,
)
from subnetcalc.ip.prefix import SubnetInfo

FORMAT_CHOICES = [f.value for f in OutputFormat]


def fail(console: Console, error: Exception):
    console.print(f"[red]Error:[/red] {error}")
    raise SystemExit(1)


def parse_new_prefix(value: str) -> int:
    """Accept '26' or '/26'."""
    text = value.strip().lstrip("/")
    if not (text.isascii() and text.isdigit()):
        raise click.BadParameter(f"'{value}' is not a prefix length")
    return int(text)


def load_network(console: Console, text: str) -> SubnetInfo:
    result = evaluate(text)
    if result.error:
        fail(console, result.error)
    return result.info


def print_subnet_list(console: Console, result: EnumerationResult):
    console.print(f"[cyan]{subnet_list_title(result)}[/cyan]\n")
    console.print(format_subnet_list(result), highlight=False)


@click.group()
def ip():
    """IP address and CIDR utilities."""
    pass


@ip.command()
@click.argument("cidr")
@click.option("-f", "--format", "fmt", type=click.Choice(FORMAT_CHOICES),
              help="Output format (default from SUBNETCALC_FORMAT)")
@click.option("--all", "show_all", is_flag=True, help="Show supplementary calculations")
@click.option("--check", "check_address", help="Also check whether ADDRESS is in the network")
@click.option("--shift", "new_prefix", help="Also recompute the network at a new prefix length")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def calc(cidr: str, fmt: str | None, show_all: bool, check_address: str | None,
         new_prefix: str | None, as_json: bool):
    """Calculate subnet information from address or CIDR notation.

    Examples:
        subnetcalc ip calc 192.168.1.0/24
        subnetcalc ip calc 192.168.1.100
        subnetcalc ip calc 2001:db8::/64 --format detailed
        subnetcalc ip calc 10.0.0.0/8 --check 10.1.2.3 --shift 10
    """
    console = Console()
    config = get_config()

    info = load_network(console, cidr)

    check_result = None
    if check_address:
        check_result = check_contains(check_address, info)
        if check_result.error:
            fail(console, check_result.error)

    shift_result = None
    if new_prefix:
        shift_result = shift_network(info, parse_new_prefix(new_prefix), config.max_subnets)
        if shift_result.error:
            fail(console, shift_result.error)

    if as_json:
        output = {"input": cidr, "subnet": info.to_dict()}
        if check_result:
            output["contains"] = {"address": check_address, "result": check_result.result}
        if shift_result:
            output["shift"] = {
                "direction": shift_result.direction.value,
                "subnet": shift_result.shifted.to_dict(),
            }
            if shift_result.subnets:
                output["shift"]["subnets"] = shift_result.subnets.subnets
                output["shift"]["total_count"] = shift_result.subnets.total_count
        click.echo(json.dumps(output, indent=2))
        return

    output_format = OutputFormat(fmt or config.output_format)
    console.print(Panel(format_info(info, output_format), title=f"Subnet Calculation: {cidr}"),
                  highlight=False)

    if check_result:
        network = f"{info.network}/{info.cidr}"
        if check_result.result:
            console.print(f"[green]YES[/green] - {check_address} is within original subnet {network}")
        else:
            console.print(f"[red]NO[/red] - {check_address} is NOT within original subnet {network}")

    if shift_result and shift_result.direction is not ShiftDirection.UNCHANGED:
        title = f"{shift_result.direction.value.capitalize()} Result (/{shift_result.new_cidr})"
        console.print(Panel(format_info(shift_result.shifted, output_format), title=title),
                      highlight=False)

    if show_all:
        shown = shift_result.shifted if shift_result else info
        table = Table(show_header=False, box=None)
        table.add_column("Calculation", style="cyan")
        table.add_column("Result", style="white")
        for title, text in calculation_sections(shown).items():
            table.add_row(title, text)
            table.add_row("", "")
        console.print(table)

    if shift_result and shift_result.subnets:
        console.print()
        print_subnet_list(console, shift_result.subnets)


@ip.command()
@click.argument("cidr")
@click.argument("address")
def contains(cidr: str, address: str):
    """Check if a network contains an IP address.

    Examples:
        subnetcalc ip contains 192.168.1.0/24 192.168.1.200
        subnetcalc ip contains 2001:db8::/32 2001:db8:1::1
    """
    console = Console()

    info = load_network(console, cidr)
    result = check_contains(address, info)
    if result.error:
        fail(console, result.error)

    if result.result:
        console.print(f"[green]Yes[/green] - {address} is within {result.network}")
    else:
        console.print(f"[red]No[/red] - {address} is not within {result.network}")


@ip.command()
@click.argument("cidr")
@click.argument("new_prefix")
@click.option("--max", "max_results", type=click.IntRange(min=0),
              help="Maximum number of subnets to list (default from SUBNETCALC_MAX_SUBNETS)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def split(cidr: str, new_prefix: str, max_results: int | None, as_json: bool):
    """Split a network into smaller subnets.

    Examples:
        subnetcalc ip split 192.168.1.0/24 26
        subnetcalc ip split 10.0.0.0/8 /16 --max 16
    """
    console = Console()
    if max_results is None:
        max_results = get_config().max_subnets

    info = load_network(console, cidr)
    result = list_subnets(info, parse_new_prefix(new_prefix), max_results)
    if result.error:
        fail(console, result.error)

    if as_json:
        click.echo(json.dumps({
            "network": result.network,
            "new_prefix": result.new_cidr,
            "total_count": result.total_count,
            "subnets": result.subnets,
        }, indent=2))
        return

    console.print(f"[cyan]Splitting {result.network} into /{result.new_cidr} subnets:[/cyan]")
    print_subnet_list(console, result)


@ip.command()
@click.argument("cidr")
@click.argument("new_prefix")
@click.option("--max", "max_results", type=click.IntRange(min=0),
              help="Maximum number of subnets to list when subnetting")
def shift(cidr: str, new_prefix: str, max_results: int | None):
    """Recompute a network at a shorter or longer prefix length.

    Examples:
        subnetcalc ip shift 192.168.1.0/24 22
        subnetcalc ip shift 192.168.1.0/24 26
    """
    console = Console()
    if max_results is None:
        max_results = get_config().max_subnets

    info = load_network(console, cidr)
    result = shift_network(info, parse_new_prefix(new_prefix), max_results)
    if result.error:
        fail(console, result.error)

    shifted = result.shifted
    console.print(f"[cyan]{result.direction.value.capitalize()}:[/cyan] "
                  f"{info.network}/{info.cidr} -> {shifted.network}/{shifted.cidr}", highlight=False)
    console.print(format_info(shifted), highlight=False)

    if result.subnets:
        console.print()
        print_subnet_list(console, result.subnets)


@ip.command()
@click.argument("address")
def compress(address: str):
    """Show the expanded and compressed forms of an IPv6 address.

    Examples:
        subnetcalc ip compress 2001:0db8:0000:0000:0000:0000:0000:0001
    """
    console = Console()

    try:
        expanded = expand_ipv6(address)
        compressed = compress_ipv6(address)
    except SubnetError as e:
        fail(console, e)

    table = Table(title=f"IPv6 Address: {address}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Expanded", expanded)
    table.add_row("Compressed", compressed)
    console.print(table)
