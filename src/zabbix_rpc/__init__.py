"""Client for the Zabbix JSON-RPC management API."""

from zabbix_rpc.client import ZabbixAPI as ZabbixAPI
from zabbix_rpc.errors import DecodingError as DecodingError
from zabbix_rpc.errors import EncodingError as EncodingError
from zabbix_rpc.errors import ProtocolError as ProtocolError
from zabbix_rpc.errors import TransportError as TransportError
from zabbix_rpc.errors import ZabbixAPIError as ZabbixAPIError
from zabbix_rpc.records import Graph as Graph
from zabbix_rpc.records import GraphItem as GraphItem
from zabbix_rpc.records import HistoryItem as HistoryItem
from zabbix_rpc.records import Host as Host
