"""Conversions between the resource kinds and their wire messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

from tinkcore.meta import GROUP_VERSION, ObjectMeta, TypeMeta
from tinkcore.template import TEMPLATE_ID_ANNOTATION, Template, TemplateSpec
from tinkcore.workflow import (
    WORKFLOW_ID_ANNOTATION,
    Workflow,
    WorkflowSpec,
    WorkflowState,
    WorkflowStatus,
)

__all__ = [
    "State",
    "WorkflowTemplate",
    "WorkflowContext",
    "WorkflowRecord",
    "WorkflowAction",
    "WorkflowActionList",
    "template_crd_to_proto",
    "template_proto_to_crd",
    "workflow_to_workflow_context",
    "workflow_crd_to_proto",
    "workflow_action_list_crd_to_proto",
    "workflow_proto_to_crd",
]


class State(IntEnum):
    """Workflow state as carried in wire messages."""

    PENDING = 0
    RUNNING = 1
    FAILED = 2
    TIMEOUT = 3
    SUCCESS = 4

    @property
    def wire_name(self) -> str:
        """The state's name on the wire, e.g. ``STATE_PENDING``."""
        return f"STATE_{self.name}"

    @classmethod
    def from_name(cls, name: str, default: State | None = None) -> State | None:
        """Look a state up by its wire name, returning ``default`` if unknown."""
        for state in cls:
            if state.wire_name == name:
                return state
        return default


@dataclass
class WorkflowTemplate:
    """A workflow template as exchanged with clients."""

    id: str = ""
    name: str = ""
    created_at: datetime | None = None
    deleted_at: datetime | None = None
    data: str = ""


@dataclass
class WorkflowContext:
    """The progress of a workflow as reported to workers."""

    workflow_id: str = ""
    current_worker: str = ""
    current_task: str = ""
    current_action: str = ""
    current_action_index: int = 0
    current_action_state: State = State.PENDING
    total_number_of_actions: int = 0


@dataclass
class WorkflowRecord:
    """A workflow as exchanged with clients."""

    id: str = ""
    template: str = ""
    state: State = State.PENDING
    created_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass
class WorkflowAction:
    """One action a worker is to run, with task settings merged in."""

    task_name: str = ""
    name: str = ""
    image: str = ""
    timeout: int = 0
    command: list[str] = field(default_factory=list)
    worker_id: str = ""
    volumes: list[str] = field(default_factory=list)
    environment: list[str] = field(default_factory=list)
    pid: str = ""


@dataclass
class WorkflowActionList:
    """All actions of a workflow in execution order."""

    action_list: list[WorkflowAction] = field(default_factory=list)


def _state_name(state: WorkflowState | None) -> str:
    return state.value if state is not None else ""


def template_crd_to_proto(template: Template | None) -> WorkflowTemplate | None:
    """Convert a Template resource to its wire message."""
    if template is None:
        return None
    return WorkflowTemplate(
        id=template.tink_id,
        name=template.metadata.name,
        created_at=template.metadata.creation_timestamp,
        deleted_at=template.metadata.deletion_timestamp,
        data=template.spec.data if template.spec.data is not None else "",
    )


def template_proto_to_crd(template: WorkflowTemplate | None) -> Template | None:
    """Convert a template wire message to a Template resource."""
    if template is None:
        return None
    return Template(
        type_meta=TypeMeta(kind="Template", api_version=str(GROUP_VERSION)),
        metadata=ObjectMeta(
            name=template.name,
            annotations={TEMPLATE_ID_ANNOTATION: template.id},
            creation_timestamp=template.created_at,
            deletion_timestamp=template.deleted_at,
        ),
        spec=TemplateSpec(data=template.data),
    )


def workflow_to_workflow_context(workflow: Workflow | None) -> WorkflowContext | None:
    """Summarise where a workflow stands for the workers running it."""
    if workflow is None:
        return None
    info = workflow.task_action_info
    return WorkflowContext(
        workflow_id=workflow.metadata.name,
        current_worker=info.current_worker,
        current_task=info.current_task,
        current_action=info.current_action,
        current_action_index=info.current_action_index,
        current_action_state=State.from_name(
            _state_name(info.current_action_state), State.PENDING
        ),
        total_number_of_actions=info.total_number_of_actions,
    )


def workflow_crd_to_proto(workflow: Workflow | None) -> WorkflowRecord | None:
    """Convert a Workflow resource to its wire message; unknown states become pending."""
    if workflow is None:
        return None
    return WorkflowRecord(
        id=workflow.tink_id,
        template=workflow.spec.template_ref,
        state=State.from_name(_state_name(workflow.status.state), State.PENDING),
        created_at=workflow.metadata.creation_timestamp,
        deleted_at=workflow.metadata.deletion_timestamp,
    )


def workflow_action_list_crd_to_proto(workflow: Workflow | None) -> WorkflowActionList | None:
    """List every action of a workflow, merging task volumes and environment."""
    if workflow is None:
        return None
    actions = []
    for task in workflow.status.tasks:
        for action in task.actions:
            merged = {**task.environment, **action.environment}
            actions.append(
                WorkflowAction(
                    task_name=task.name,
                    name=action.name,
                    image=action.image,
                    timeout=action.timeout,
                    command=list(action.command),
                    worker_id=task.worker_addr,
                    volumes=[*task.volumes, *action.volumes],
                    environment=sorted(f"{key}={value}" for key, value in merged.items()),
                    pid=action.pid,
                )
            )
    return WorkflowActionList(action_list=actions)


def workflow_proto_to_crd(record: WorkflowRecord | None) -> Workflow | None:
    """Convert a workflow wire message to a Workflow resource."""
    if record is None:
        return None
    status = WorkflowStatus()
    try:
        status.state = WorkflowState(State(record.state).wire_name)
    except ValueError:
        status.state = None
    return Workflow(
        type_meta=TypeMeta(kind="Workflow", api_version=str(GROUP_VERSION)),
        metadata=ObjectMeta(
            annotations={WORKFLOW_ID_ANNOTATION: record.id},
            creation_timestamp=record.created_at,
        ),
        spec=WorkflowSpec(),
        status=status,
    )