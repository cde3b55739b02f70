"""Tests for trigger operations."""

from zabbix_api.entities.trigger import Trigger, TriggerPriority, TriggerValue, TriggerValueFlags

TRIGGER_DATA = {
    "triggerid": "13779",
    "description": "Zabbix agent on {HOST.NAME} is unreachable",
    "expression": "{Zabbix server:agent.ping.nodata(5m)}=1",
    "priority": "3",
    "status": "0",
    "value": "1",
    "value_flags": "0",
    "lastchange": "1351090998",
    "functions": [
        {"functionid": "12010", "itemid": "23287", "function": "nodata", "parameter": "5m"},
    ],
}


class TestTriggerGet:
    """Test trigger.get."""

    def test_defaults(self, api, server):
        server.respond("trigger.get", [TRIGGER_DATA])

        triggers = api.triggers.get_by_host_id("10084")

        assert server.last_params == {
            "hostids": "10084",
            "output": "extend",
            "expandExpression": "extend",
            "expandDescription": "flag",
            "selectFunctions": "extend",
        }
        trigger = triggers[0]
        assert trigger.priority == TriggerPriority.AVERAGE
        assert trigger.value == TriggerValue.PROBLEM
        assert trigger.last_change == 1351090998
        assert trigger.functions[0].item_id == "23287"

    def test_legacy_params(self, legacy_api, server):
        """Test that 1.8 gets select_functions and no expandExpression."""
        server.respond("trigger.get", [])

        legacy_api.triggers.get()

        assert server.last_params == {
            "output": "extend",
            "expandDescription": "flag",
            "select_functions": "extend",
        }

    def test_legacy_unknown_value(self, legacy_api, server):
        """Test that the 1.8 unknown value becomes OK with the unknown flag."""
        server.respond(
            "trigger.get",
            [
                {"triggerid": "1", "value": "2", "value_flags": "0"},
                {"triggerid": "2", "value": "1", "value_flags": "0"},
            ],
        )

        unknown, problem = legacy_api.triggers.get()

        assert (unknown.value, unknown.value_flags) == (TriggerValue.OK, TriggerValueFlags.UNKNOWN)
        assert (problem.value, problem.value_flags) == (TriggerValue.PROBLEM, TriggerValueFlags.UP_TO_DATE)

    def test_current_value_untouched(self, api, server):
        server.respond("trigger.get", [{"triggerid": "1", "value": "2", "value_flags": "0"}])

        trigger = api.triggers.get()[0]

        assert trigger.value == 2
        assert trigger.value_flags == TriggerValueFlags.UP_TO_DATE


class TestTriggerMutations:
    """Test trigger.create."""

    def test_create(self, api, server):
        server.respond("trigger.create", {"triggerids": ["17369"]})
        trigger = Trigger(
            description="Processor load is too high on {HOST.NAME}",
            expression="{Linux server:system.cpu.load[percpu,avg1].last()}>5",
            priority=TriggerPriority.HIGH,
            value=TriggerValue.PROBLEM,
        )

        api.triggers.create([trigger])

        payload = server.last_params[0]
        assert trigger.trigger_id == "17369"
        assert payload["priority"] == "4"
        assert "triggerid" not in payload
        assert "value" not in payload
        assert "functions" not in payload
