"""
IP/CIDR CLI commands.
"""

import json
from dataclasses import asdict
from itertools import islice

import click
from rich.console import Console
from rich.table import Table

from subnetkit.config import get_config
from subnetkit.logging_config import track_error
from subnetkit.ip.parser import DECIMAL_PATTERN
from subnetkit.ip.core import (
    analyze_ip,
    parse_cidr,
    calculate_subnet,
    split_subnet,
    subnet_mask_for_prefix,
    wildcard_mask_for_prefix,
    is_ip_in_subnet,
)


def _json_wanted(json_out: bool) -> bool:
    return json_out or get_config().output_format == "json"


def _fail(console: Console, error_type: str, message: str, value: str) -> None:
    track_error(error_type, message, {"input": value})
    console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(1)


def _flag(value: bool, style: str = "yellow") -> str:
    return f"[{style}]Yes[/{style}]" if value else "[dim]No[/dim]"


@click.group()
def ip():
    """IP address and CIDR utilities."""
    pass


@ip.command()
@click.argument("address")
@click.option("--json-output", "json_out", is_flag=True, help="Output as JSON")
def info(address: str, json_out: bool):
    """Classify an IPv4 or IPv6 address.

    Examples:
        subnetkit ip info 8.8.8.8
        subnetkit ip info 192.168.1.10
        subnetkit ip info fe80::1
    """
    console = Console()
    result = analyze_ip(address)

    if _json_wanted(json_out):
        click.echo(json.dumps(asdict(result), indent=2))
        if not result.is_valid:
            track_error("invalid_address", "Invalid IP address", {"input": address})
            raise SystemExit(1)
        return

    if not result.is_valid:
        _fail(console, "invalid_address", f"{address} is not a valid IPv4 or IPv6 address", address)

    table = Table(title=f"IP Information: {address}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Address", result.ip)
    table.add_row("Version", f"IPv{result.version}")
    table.add_row("Private", _flag(result.is_private))
    table.add_row("Reserved", _flag(result.is_reserved, "red"))
    table.add_row("Loopback", _flag(result.is_loopback, "blue"))
    table.add_row("Multicast", _flag(result.is_multicast, "magenta"))
    table.add_row("Link-Local", _flag(result.is_link_local, "cyan"))
    table.add_row("Public", _flag(result.is_public, "green"))

    if result.version == 4:
        table.add_row("", "")
        table.add_row("Integer", str(result.integer))
        table.add_row("Binary", result.binary)
        table.add_row("Hex", result.hex)

    console.print(table)


@ip.command()
@click.argument("cidr")
@click.option("--json-output", "json_out", is_flag=True, help="Output as JSON")
def cidr(cidr: str, json_out: bool):
    """Show network, broadcast and host range of a CIDR block.

    Examples:
        subnetkit ip cidr 192.168.1.0/24
        subnetkit ip cidr 10.0.0.0/30
    """
    console = Console()
    block = parse_cidr(cidr)

    if _json_wanted(json_out):
        click.echo(json.dumps(asdict(block), indent=2))
        if not block.is_valid:
            track_error("invalid_cidr", block.error, {"input": cidr})
            raise SystemExit(1)
        return

    if not block.is_valid:
        _fail(console, "invalid_cidr", block.error, cidr)

    table = Table(title=f"CIDR Block: {cidr}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Network", block.network)
    table.add_row("Subnet Mask", block.subnet_mask)
    table.add_row("Broadcast", block.broadcast)
    table.add_row("Prefix Length", f"/{block.prefix_length}")
    table.add_row("First Host", block.first_host)
    table.add_row("Last Host", block.last_host)
    table.add_row("Usable Hosts", f"{block.host_count:,}")

    console.print(table)


@ip.command()
@click.argument("address")
@click.argument("mask")
@click.option("--json-output", "json_out", is_flag=True, help="Output as JSON")
def calc(address: str, mask: str, json_out: bool):
    """Calculate subnet information from an address and a prefix or mask.

    Examples:
        subnetkit ip calc 192.168.1.10 /24
        subnetkit ip calc 192.168.1.10 255.255.255.0
        subnetkit ip calc 10.1.2.3 8
    """
    console = Console()

    try:
        subnet = calculate_subnet(address, mask)
    except ValueError as e:
        _fail(console, "invalid_subnet", str(e), f"{address} {mask}")

    if _json_wanted(json_out):
        click.echo(json.dumps(asdict(subnet), indent=2))
        return

    table = Table(title=f"Subnet Calculator: {address} {mask}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("CIDR", subnet.cidr)
    table.add_row("Network", subnet.network_address)
    table.add_row("Broadcast", subnet.broadcast_address)
    table.add_row("Netmask", subnet.subnet_mask)
    table.add_row("Wildcard", subnet.wildcard_mask)
    table.add_row("Prefix Length", f"/{subnet.prefix_length}")
    table.add_row("Network Class", subnet.network_class)
    table.add_row("Total Addresses", f"{subnet.total_hosts:,}")
    table.add_row("Usable Hosts", f"{subnet.usable_hosts:,}")
    if subnet.usable_hosts:
        table.add_row("First Host", subnet.first_host)
        table.add_row("Last Host", subnet.last_host)

    console.print(table)


@ip.command()
@click.argument("cidr")
@click.argument("new_prefix")
def split(cidr: str, new_prefix: str):
    """Split a CIDR into smaller subnets.

    Examples:
        subnetkit ip split 10.0.0.0/8 /16
        subnetkit ip split 192.168.0.0/24 26
    """
    console = Console()
    limit = get_config().split_display_limit

    block = parse_cidr(cidr)
    if not block.is_valid:
        _fail(console, "invalid_cidr", block.error, cidr)

    prefix_text = new_prefix[1:] if new_prefix.startswith("/") else new_prefix
    if not DECIMAL_PATTERN.fullmatch(prefix_text):
        _fail(console, "invalid_prefix", f"Invalid prefix length: {new_prefix}", new_prefix)
    if len(prefix_text.lstrip("0")) > 2:
        _fail(console, "invalid_prefix", "Prefix length must be between 0 and 32", new_prefix)
    target = int(prefix_text)

    try:
        subnets = split_subnet(block.network, block.prefix_length, target)
    except ValueError as e:
        _fail(console, "invalid_split", str(e), f"{cidr} {new_prefix}")

    total = 2 ** (target - block.prefix_length)
    console.print(f"[cyan]Splitting {block.network}/{block.prefix_length} into /{target} subnets:[/cyan]")
    console.print(f"[dim]Total subnets: {total:,}[/dim]\n")

    if total > limit:
        console.print(f"[yellow]Showing first {limit} subnets...[/yellow]\n")

    for subnet in islice(subnets, limit):
        console.print(subnet.cidr)

    if total > limit:
        console.print(f"\n[dim]... and {total - limit:,} more[/dim]")


@ip.command()
@click.argument("prefix", type=int)
def mask(prefix: int):
    """Show the subnet and wildcard mask for a prefix length.

    Examples:
        subnetkit ip mask 24
    """
    console = Console()

    try:
        netmask = subnet_mask_for_prefix(prefix)
        wildcard = wildcard_mask_for_prefix(prefix)
    except ValueError as e:
        _fail(console, "invalid_prefix", str(e), str(prefix))

    console.print(f"[cyan]/{prefix}[/cyan]  netmask {netmask}  wildcard {wildcard}")


@ip.command()
@click.argument("cidr")
@click.argument("address")
def contains(cidr: str, address: str):
    """Check if a CIDR contains an IP address.

    Examples:
        subnetkit ip contains 10.0.0.0/8 10.1.2.3
    """
    console = Console()

    block = parse_cidr(cidr)
    if not block.is_valid:
        _fail(console, "invalid_cidr", block.error, cidr)

    if is_ip_in_subnet(address, block.network, block.prefix_length):
        console.print(f"[green]Yes[/green] - {address} is within {cidr}")
    else:
        console.print(f"[red]No[/red] - {address} is not within {cidr}")


@ip.command()
@click.argument("addresses", nargs=-1, required=True)
def check(addresses: tuple[str, ...]):
    """Summarize the address category of many addresses.

    Examples:
        subnetkit ip check 8.8.8.8 192.168.1.1 127.0.0.1 224.0.0.1
    """
    console = Console()

    table = Table(title="IP Address Check", box=None)
    table.add_column("Address", style="white")
    table.add_column("Version", style="white")
    table.add_column("Status", style="white")

    for addr in addresses:
        result = analyze_ip(addr)

        if not result.is_valid:
            track_error("invalid_address", "Invalid IP address", {"input": addr})
            status = "[red]Invalid[/red]"
        elif result.is_loopback:
            status = "[blue]Loopback[/blue]"
        elif result.is_multicast:
            status = "[magenta]Multicast[/magenta]"
        elif result.is_link_local:
            status = "[cyan]Link-local[/cyan]"
        elif result.is_private:
            status = "[yellow]Private[/yellow]"
        elif result.is_reserved:
            status = "[red]Reserved[/red]"
        else:
            status = "[green]Public[/green]"

        version = f"IPv{result.version}" if result.version else "-"
        table.add_row(addr, version, status)

    console.print(table)
