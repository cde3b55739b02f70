"""Typed clients for the Zabbix entity kinds."""

from .application import Application, ApplicationClient
from .base import EntityClient, EntityReader, QueryClient, ZabbixObject
from .event import Acknowledge, Event, EventClient, ObjectType, SourceType
from .history import History, HistoryClient, HistoryType
from .host import AvailableType, Host, HostClient, HostId, StatusType
from .host_group import HostGroup, HostGroupClient, HostGroupId, InternalType
from .host_interface import HostInterface, HostInterfaceClient, InterfaceType
from .item import (
    AppInfo,
    DataType,
    DeltaType,
    Item,
    ItemClient,
    ItemType,
    ValueType,
    items_by_key,
)
from .proxy import Proxy, ProxyClient
from .sla import SLA, SLAClient
from .template import Template, TemplateClient, TemplateId, TemplateMacro
from .trigger import (
    Trigger,
    TriggerClient,
    TriggerFlags,
    TriggerFunction,
    TriggerPriority,
    TriggerStatus,
    TriggerType,
    TriggerValue,
    TriggerValueFlags,
)
from .usermacro import UserMacro, UserMacroClient
