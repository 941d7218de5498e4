# tinkcore

`tinkcore` models the resources used to provision bare-metal machines:
hardware descriptions, workflow templates and the workflows built from them.
It is a plain-Python library with no runtime dependencies.

## What is in it

- `tinkcore.meta`: `GroupVersion` (and the `GROUP_VERSION` constant,
  `tinkerbell.org/v1alpha1`), `TypeMeta` and `ObjectMeta`.
  `ObjectMeta.is_deleted()` is true once a deletion timestamp is set.
- `tinkcore.hardware`: the `Hardware` resource with its `HardwareSpec`,
  `HardwareStatus`, network `Interface`, `DHCP`, `IP`, `Netboot`, `IPXE`,
  `OSIE`, `Disk` and the `Metadata*` dataclasses, plus `HardwareList` and
  `HardwareState`.
- `tinkcore.template`: the `Template` resource with `TemplateSpec`
  (its YAML text in `data`), `TemplateStatus`, `TemplateState` and
  `TemplateList`.
- `tinkcore.workflow`: the `Workflow` resource with `WorkflowSpec`,
  `WorkflowStatus`, `Task`, `Action`, `WorkflowState` and `WorkflowList`,
  and the `WorkflowData` resource family.
- `tinkcore.indexers`: functions that pull lookup keys out of resources:
  `workflow_worker_addr_index`, `workflow_worker_non_terminal_state_index`,
  `workflow_state_index`, `hardware_mac_index` and `hardware_ip_index`.
  Each returns `None` when given an object of the wrong kind.
- `tinkcore.convert`: flat wire records (`WorkflowTemplate`,
  `WorkflowRecord`, `WorkflowContext`, `WorkflowAction`,
  `WorkflowActionList`, and the integer `State` enum) and converters
  `template_crd_to_proto`, `template_proto_to_crd`,
  `workflow_to_workflow_context`, `workflow_crd_to_proto`,
  `workflow_action_list_crd_to_proto` and `workflow_proto_to_crd`.
  All of them return `None` for `None`.
- `tinkcore.hardware_json`: `dumps_hardware` encodes a hardware mapping
  whose `metadata` is a JSON string, writing that metadata as a nested
  object; `loads_hardware` decodes such a document and turns the
  `metadata` object back into a JSON string.
- `tinkcore.reconcile`: a `Result` value (`requeue`, `requeue_after`), an
  abstract `Controller` base with a `reconcile(request)` method, and
  `retry_if_error`, which logs each error (unpacking exception groups) and
  returns a `Result` asking for a requeue when there was one.

### Identifiers and progress

`Hardware`, `Template` and `Workflow` each have a `tink_id` property that
reads and writes the resource's ID annotation (an empty string when unset).

A `Workflow` reports its progress through properties: `start_time`,
`task_action_info` (a `TaskInfo`), `current_worker`, `current_task`,
`current_task_index`, `current_action`, `current_action_index`,
`current_action_state` and `total_number_of_actions`. The current action
is the first one that has not succeeded; `current_action_index` counts the
successful actions before it.

In `workflow_action_list_crd_to_proto`, each action gets its task's volumes
followed by its own, and an environment built from the task's variables
overridden by the action's, as sorted `KEY=value` strings.

## Installation

```
pip install tinkcore
```

To run the tests:

```
pip install "tinkcore[test]"
pytest
```

## Example

```python
from tinkcore.workflow import Workflow, WorkflowStatus, Task, Action, WorkflowState
from tinkcore.indexers import workflow_worker_addr_index
from tinkcore.convert import workflow_action_list_crd_to_proto

wf = Workflow(
    status=WorkflowStatus(
        state=WorkflowState.RUNNING,
        tasks=[
            Task(
                name="os-installation",
                worker_addr="worker1",
                actions=[
                    Action(name="stream-image", status=WorkflowState.SUCCESS),
                    Action(name="kexec", status=WorkflowState.RUNNING),
                ],
            )
        ],
    )
)

wf.current_action                   # "kexec"
wf.current_action_index             # 1
workflow_worker_addr_index(wf)      # ["worker1"]
workflow_action_list_crd_to_proto(wf).action_list[1].name  # "kexec"
```

## What it does not do

The package holds data and pure functions only. It does not store
resources or talk to a cluster or API server, it ships no concrete
`Controller` that reconciles workflows, it does not render or parse
workflow templates, and it provides no command-line tool or server.