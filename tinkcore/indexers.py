"""Field index functions for looking up workflows and hardware."""

from __future__ import annotations

from tinkcore.hardware import Hardware
from tinkcore.workflow import Workflow, WorkflowState

__all__ = [
    "WORKFLOW_WORKER_ADDR_INDEX",
    "WORKFLOW_WORKER_NON_TERMINAL_STATE_INDEX",
    "WORKFLOW_STATE_INDEX",
    "HARDWARE_MAC_ADDR_INDEX",
    "HARDWARE_IP_ADDR_INDEX",
    "workflow_worker_addr_index",
    "workflow_worker_non_terminal_state_index",
    "workflow_state_index",
    "hardware_mac_index",
    "hardware_ip_index",
]

WORKFLOW_WORKER_ADDR_INDEX = ".status.tasks.workerAddr"
WORKFLOW_WORKER_NON_TERMINAL_STATE_INDEX = ".status.state.nonTerminalWorker"
WORKFLOW_STATE_INDEX = ".status.state"
HARDWARE_MAC_ADDR_INDEX = ".spec.interfaces.dhcp.mac"
HARDWARE_IP_ADDR_INDEX = ".spec.interfaces.dhcp.ip"


def _worker_addrs(workflow: Workflow) -> list[str]:
    return [task.worker_addr for task in workflow.status.tasks if task.worker_addr]


def workflow_worker_addr_index(obj: object) -> list[str] | None:
    """Worker addresses of a workflow's tasks; None for other objects."""
    if not isinstance(obj, Workflow):
        return None
    return _worker_addrs(obj)


def workflow_worker_non_terminal_state_index(obj: object) -> list[str] | None:
    """Worker addresses of a workflow that is pending or running."""
    if not isinstance(obj, Workflow):
        return None
    if obj.status.state not in (WorkflowState.RUNNING, WorkflowState.PENDING):
        return []
    return _worker_addrs(obj)


def workflow_state_index(obj: object) -> list[str] | None:
    """The workflow state as a one-element list."""
    if not isinstance(obj, Workflow):
        return None
    state = obj.status.state
    return [state.value if state is not None else ""]


def hardware_mac_index(obj: object) -> list[str] | None:
    """MAC addresses from the DHCP settings of a machine's interfaces."""
    if not isinstance(obj, Hardware):
        return None
    return [
        iface.dhcp.mac
        for iface in obj.spec.interfaces
        if iface.dhcp is not None and iface.dhcp.mac
    ]


def hardware_ip_index(obj: object) -> list[str] | None:
    """IP addresses from the DHCP settings of a machine's interfaces."""
    if not isinstance(obj, Hardware):
        return None
    return [
        iface.dhcp.ip.address
        for iface in obj.spec.interfaces
        if iface.dhcp is not None and iface.dhcp.ip is not None and iface.dhcp.ip.address
    ]