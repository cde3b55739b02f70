"""Unit tests for CLI interface."""

import pytest
from unittest.mock import Mock, patch
from click.testing import CliRunner

from zabbix_api.cli import cli
from zabbix_api.config import AppConfig, ZabbixConfig
from zabbix_api.entities.event import Event
from zabbix_api.entities.host import Host
from zabbix_api.entities.host_group import HostGroupId
from zabbix_api.entities.host_interface import HostInterface
from zabbix_api.entities.trigger import Trigger
from zabbix_api.errors import ExpectedOneResult, ZabbixRPCError


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def mock_config():
    """Create mock configuration."""
    return AppConfig(
        zabbix=ZabbixConfig(
            url="https://zabbix.example.com",
            username="Admin",
            password="zabbix",
        ),
        log_level="WARNING",
    )


@pytest.fixture
def mock_api(mock_config):
    """Patch config loading and the API session used by the CLI."""
    with patch('zabbix_api.cli.load_config') as mock_load_config, \
            patch('zabbix_api.cli.ZabbixAPI') as mock_api_class, \
            patch('zabbix_api.cli.setup_logging'):
        mock_load_config.return_value = mock_config
        api = Mock()
        api.auth = ""
        mock_api_class.from_config.return_value = api
        yield api


class TestCLIInitialization:
    """Test CLI initialization and setup."""

    @patch('zabbix_api.cli.load_config')
    def test_config_error(self, mock_load_config, runner):
        """Test CLI initialization with configuration error."""
        mock_load_config.side_effect = Exception("Config error")

        result = runner.invoke(cli, ['version'])

        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_config_file_passed(self, runner, mock_api):
        mock_api.api_version.return_value = "2.0.11"

        with patch('zabbix_api.cli.load_config') as mock_load_config:
            mock_load_config.return_value = AppConfig(
                zabbix=ZabbixConfig(url="zabbix.local", username="a", password="b")
            )
            result = runner.invoke(cli, ['--config', 'custom.yaml', 'version'])

        assert result.exit_code == 0
        mock_load_config.assert_called_once_with(config_file='custom.yaml')


class TestCommands:
    """Test the individual commands."""

    def test_version(self, runner, mock_api):
        """Test that version does not need a login."""
        mock_api.api_version.return_value = "2.4.5"

        result = runner.invoke(cli, ['version'])

        assert result.exit_code == 0
        assert "2.4.5" in result.output
        mock_api.login.assert_not_called()

    def test_hosts(self, runner, mock_api):
        mock_api.hosts.get.return_value = [
            Host(host_id="10084", host="Zabbix server", name="Zabbix server"),
            Host(host_id="10105", host="web01", name="Web 01", status=1),
        ]

        result = runner.invoke(cli, ['hosts'])

        assert result.exit_code == 0
        mock_api.login.assert_called_once_with("Admin", "zabbix")
        assert "10084\tZabbix server\tZabbix server\tmonitored" in result.output
        assert "10105\tweb01\tWeb 01\tunmonitored" in result.output

    def test_hosts_by_group(self, runner, mock_api):
        mock_api.hosts.get_by_host_group_ids.return_value = []

        result = runner.invoke(cli, ['hosts', '--group-id', '2', '--group-id', '4'])

        assert result.exit_code == 0
        mock_api.hosts.get_by_host_group_ids.assert_called_once_with(['2', '4'])
        assert "No hosts found." in result.output

    def test_host(self, runner, mock_api):
        mock_api.hosts.get_by_id.return_value = Host(
            host_id="10084",
            host="Zabbix server",
            name="Zabbix server",
            groups=[HostGroupId(group_id="4")],
            interfaces=[HostInterface(interface_id="1", ip="127.0.0.1", use_ip=1, port="10050")],
        )

        result = runner.invoke(cli, ['host', '10084'])

        assert result.exit_code == 0
        assert "Host: Zabbix server (10084)" in result.output
        assert "Groups: 4" in result.output
        assert "Interface 1: 127.0.0.1:10050" in result.output

    def test_host_not_found(self, runner, mock_api):
        mock_api.hosts.get_by_id.side_effect = ExpectedOneResult(0)

        result = runner.invoke(cli, ['host', '99999'])

        assert result.exit_code == 1
        assert "Expected exactly one result, got 0." in result.output

    def test_login_failure(self, runner, mock_api):
        mock_api.login.side_effect = ZabbixRPCError(-32602, "Invalid params.", "Login name or password is incorrect.")

        result = runner.invoke(cli, ['hosts'])

        assert result.exit_code == 1
        assert "Login name or password is incorrect." in result.output

    def test_triggers(self, runner, mock_api):
        mock_api.triggers.get_by_host_id.return_value = [
            Trigger(trigger_id="13779", description="Agent unreachable", priority=3, value=1),
            Trigger(trigger_id="13780", description="Disk full", priority=4, value=0, value_flags=1),
        ]

        result = runner.invoke(cli, ['triggers', '--host-id', '10084'])

        assert result.exit_code == 0
        mock_api.triggers.get_by_host_id.assert_called_once_with('10084')
        assert "13779\tPROBLEM\tP3\tAgent unreachable" in result.output
        assert "13780\tUNKNOWN\tP4\tDisk full" in result.output

    def test_events(self, runner, mock_api):
        mock_api.events.get.return_value = [Event(event_id="9695", clock=1347970410, object_id="13926", value=1)]

        result = runner.invoke(cli, ['events', '--limit', '5'])

        assert result.exit_code == 0
        params = mock_api.events.get.call_args.args[0]
        assert params["limit"] == 5
        assert params["sortorder"] == "DESC"
        assert "9695\t1347970410\tobject 13926\tvalue 1" in result.output
