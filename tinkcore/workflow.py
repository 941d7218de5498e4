"""The Workflow resource: tasks and actions run on provisioned machines."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from tinkcore.meta import ObjectMeta, TypeMeta

__all__ = [
    "WORKFLOW_ID_ANNOTATION",
    "WorkflowState",
    "WorkflowSpec",
    "WorkflowStatus",
    "Task",
    "Action",
    "Workflow",
    "WorkflowList",
    "WorkflowDataSpec",
    "WorkflowDataStatus",
    "WorkflowData",
    "WorkflowDataList",
    "TaskInfo",
]

WORKFLOW_ID_ANNOTATION = "workflow.tinkerbell.org/id"


class WorkflowState(str, Enum):
    """State of a workflow or of one of its actions."""

    PENDING = "STATE_PENDING"
    RUNNING = "STATE_RUNNING"
    FAILED = "STATE_FAILED"
    TIMEOUT = "STATE_TIMEOUT"
    SUCCESS = "STATE_SUCCESS"


_CURRENT_STATES = frozenset(
    {
        WorkflowState.PENDING,
        WorkflowState.RUNNING,
        WorkflowState.FAILED,
        WorkflowState.TIMEOUT,
    }
)


@dataclass
class WorkflowSpec:
    """Desired state of a workflow."""

    template_ref: str = ""
    hardware_ref: str = ""
    hardware_map: dict[str, str] = field(default_factory=dict)


@dataclass
class Action:
    """A single container run within a task."""

    name: str = ""
    image: str = ""
    timeout: int = 0
    command: list[str] = field(default_factory=list)
    volumes: list[str] = field(default_factory=list)
    pid: str = ""
    environment: dict[str, str] = field(default_factory=dict)
    status: WorkflowState | None = None
    started_at: datetime | None = None
    seconds: int = 0
    message: str = ""


@dataclass
class Task:
    """A series of actions to be completed by one worker."""

    name: str = ""
    worker_addr: str = ""
    actions: list[Action] = field(default_factory=list)
    volumes: list[str] = field(default_factory=list)
    environment: dict[str, str] = field(default_factory=dict)


@dataclass
class WorkflowStatus:
    """Observed state of a workflow."""

    state: WorkflowState | None = None
    global_timeout: int = 0
    tasks: list[Task] = field(default_factory=list)


@dataclass(frozen=True)
class TaskInfo:
    """Where a workflow currently stands among its tasks and actions."""

    current_worker: str = ""
    current_task: str = ""
    current_task_index: int = 0
    current_action: str = ""
    current_action_index: int = 0
    current_action_state: WorkflowState | None = None
    total_number_of_actions: int = 0


@dataclass
class Workflow:
    """A workflow built from a template and bound to hardware."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkflowSpec = field(default_factory=WorkflowSpec)
    status: WorkflowStatus = field(default_factory=WorkflowStatus)

    @property
    def tink_id(self) -> str:
        """The Tinkerbell ID stored in the annotations, or an empty string."""
        return (self.metadata.annotations or {}).get(WORKFLOW_ID_ANNOTATION, "")

    @tink_id.setter
    def tink_id(self, value: str) -> None:
        if self.metadata.annotations is None:
            self.metadata.annotations = {}
        self.metadata.annotations[WORKFLOW_ID_ANNOTATION] = value

    @property
    def start_time(self) -> datetime | None:
        """Start time of the first action of the first task, if any."""
        tasks = self.status.tasks
        if tasks and tasks[0].actions:
            return tasks[0].actions[0].started_at
        return None

    @property
    def task_action_info(self) -> TaskInfo:
        """Locate the first action that has not succeeded."""
        found_task: Task | None = None
        found_task_index = 0
        found_action: Action | None = None
        succeeded = 0
        total = 0
        for task_index, task in enumerate(self.status.tasks):
            total += len(task.actions)
            if found_task is not None:
                continue
            for action in task.actions:
                if action.status == WorkflowState.SUCCESS:
                    succeeded += 1
                elif action.status in _CURRENT_STATES:
                    found_task = task
                    found_task_index = task_index
                    found_action = action
                    break

        if found_task is None or found_action is None:
            return TaskInfo(current_action_index=succeeded, total_number_of_actions=total)
        return TaskInfo(
            current_worker=found_task.worker_addr,
            current_task=found_task.name,
            current_task_index=found_task_index,
            current_action=found_action.name,
            current_action_index=succeeded,
            current_action_state=found_action.status,
            total_number_of_actions=total,
        )

    @property
    def current_worker(self) -> str:
        return self.task_action_info.current_worker

    @property
    def current_task(self) -> str:
        return self.task_action_info.current_task

    @property
    def current_task_index(self) -> int:
        return self.task_action_info.current_task_index

    @property
    def current_action(self) -> str:
        return self.task_action_info.current_action

    @property
    def current_action_index(self) -> int:
        return self.task_action_info.current_action_index

    @property
    def current_action_state(self) -> WorkflowState | None:
        return self.task_action_info.current_action_state

    @property
    def total_number_of_actions(self) -> int:
        return self.task_action_info.total_number_of_actions


@dataclass
class WorkflowList:
    """A list of Workflow resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    items: list[Workflow] = field(default_factory=list)


@dataclass
class WorkflowDataSpec:
    """Names the workflow a data record belongs to."""

    workflow_ref: str = ""


@dataclass
class WorkflowDataStatus:
    """Workflow data and metadata as stored by the engine."""

    data: str = ""
    metadata: str = ""


@dataclass
class WorkflowData:
    """Data attached to a workflow."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkflowSpec = field(default_factory=WorkflowSpec)
    status: WorkflowStatus = field(default_factory=WorkflowStatus)


@dataclass
class WorkflowDataList:
    """A list of WorkflowData resources."""

    type_meta: TypeMeta = field(default_factory=TypeMeta)
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    items: list[WorkflowData] = field(default_factory=list)