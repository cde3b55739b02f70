"""Command-line interface for the Zabbix API client."""

import sys
import logging
from typing import Optional

import click

from .api import ZabbixAPI
from .config import load_config
from .errors import ZabbixAPIError
from .logging_utils import setup_logging


def _fail(message: str) -> None:
    click.echo(f"❌ Error: {message}", err=True)
    sys.exit(1)


def _logged_in(ctx) -> ZabbixAPI:
    """Return the session, logging in on first use."""
    api: ZabbixAPI = ctx.obj['api']
    if not api.auth:
        config = ctx.obj['config'].zabbix
        api.login(config.username, config.password)
    return api


@click.group()
@click.option('--log-level', default=None, help='Logging level (DEBUG, INFO, WARNING, ERROR)')
@click.option('--config', '--config-file', help='Path to configuration file (YAML or JSON)')
@click.pass_context
def cli(ctx, log_level: Optional[str], config: Optional[str]):
    """Zabbix API client - query a Zabbix server from the command line."""
    ctx.ensure_object(dict)

    try:
        app_config = load_config(config_file=config)
    except Exception as e:
        _fail(str(e))
    ctx.obj['config'] = app_config

    # CLI flag overrides config
    setup_logging(log_level or app_config.log_level, log_requests=app_config.zabbix.log_requests)

    ctx.obj['api'] = ZabbixAPI.from_config(app_config.zabbix)
    logging.getLogger(__name__).debug(f"Using Zabbix API at {app_config.zabbix.url}")


@cli.command()
@click.pass_context
def version(ctx):
    """Show the API version of the server."""
    api: ZabbixAPI = ctx.obj['api']
    try:
        click.echo(api.api_version())
    except ZabbixAPIError as e:
        _fail(str(e))


@cli.command()
@click.option('--group-id', 'group_ids', multiple=True, help='Only hosts in this host group (repeatable)')
@click.pass_context
def hosts(ctx, group_ids):
    """List hosts."""
    try:
        api = _logged_in(ctx)
        if group_ids:
            result = api.hosts.get_by_host_group_ids(list(group_ids))
        else:
            result = api.hosts.get()
    except ZabbixAPIError as e:
        _fail(str(e))

    if not result:
        click.echo("No hosts found.")
        return
    for host in result:
        status = "monitored" if host.status == 0 else "unmonitored"
        click.echo(f"{host.host_id}\t{host.host}\t{host.name}\t{status}")


@cli.command()
@click.argument('host_id')
@click.pass_context
def host(ctx, host_id: str):
    """Show one host with its groups and interfaces."""
    try:
        result = _logged_in(ctx).hosts.get_by_id(host_id)
    except ZabbixAPIError as e:
        _fail(str(e))

    click.echo(f"Host: {result.host} ({result.host_id})")
    click.echo(f"  Name: {result.name}")
    click.echo(f"  Groups: {', '.join(group.group_id for group in result.groups) or 'none'}")
    for interface in result.interfaces:
        address = interface.ip if interface.use_ip else interface.dns
        click.echo(f"  Interface {interface.interface_id}: {address}:{interface.port}")


@cli.command()
@click.option('--host-id', default=None, help='Only triggers of this host')
@click.pass_context
def triggers(ctx, host_id: Optional[str]):
    """List triggers."""
    try:
        api = _logged_in(ctx)
        result = api.triggers.get_by_host_id(host_id) if host_id else api.triggers.get()
    except ZabbixAPIError as e:
        _fail(str(e))

    for trigger in result:
        state = "PROBLEM" if trigger.value == 1 else "OK"
        if trigger.value_flags == 1:
            state = "UNKNOWN"
        click.echo(f"{trigger.trigger_id}\t{state}\tP{trigger.priority}\t{trigger.description}")


@cli.command()
@click.option('--limit', default=20, show_default=True, help='Maximum number of events')
@click.pass_context
def events(ctx, limit: int):
    """List the most recent events."""
    try:
        result = _logged_in(ctx).events.get(
            {"sortfield": ["clock", "eventid"], "sortorder": "DESC", "limit": limit}
        )
    except ZabbixAPIError as e:
        _fail(str(e))

    for event in result:
        click.echo(f"{event.event_id}\t{event.clock}\tobject {event.object_id}\tvalue {event.value}")


if __name__ == '__main__':
    cli()
