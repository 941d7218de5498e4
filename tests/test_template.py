import pytest

from tinkcore.meta import ObjectMeta
from tinkcore.template import (
    TEMPLATE_ID_ANNOTATION,
    Template,
    TemplateList,
    TemplateSpec,
    TemplateState,
    TemplateStatus,
)

ID = "d2c26e20-97e0-449c-b665-61efa7373f47"


def _already_set():
    return Template(
        metadata=ObjectMeta(
            name="debian",
            namespace="default",
            annotations={TEMPLATE_ID_ANNOTATION: ID},
        )
    )


def _no_annotations():
    return Template(metadata=ObjectMeta(name="debian", namespace="default"))


@pytest.mark.parametrize(
    "annotations, want, overwrite",
    [
        ({TEMPLATE_ID_ANNOTATION: ID}, ID, ""),
        ({}, "", "abc"),
    ],
    ids=["already set", "nil annotations"],
)
def test_template_tink_id(annotations, want, overwrite):
    tpl = Template(
        metadata=ObjectMeta(name="debian", namespace="default", annotations=dict(annotations))
    )
    assert tpl.tink_id == want
    tpl.tink_id = overwrite
    assert tpl.tink_id == overwrite


def test_tink_id_stored_under_annotation_key():
    tpl = _no_annotations()
    tpl.tink_id = "abc"
    assert tpl.metadata.annotations == {"template.tinkerbell.org/id": "abc"}


def test_tink_id_with_none_annotations():
    tpl = Template(metadata=ObjectMeta(annotations=None))
    assert tpl.tink_id == ""
    tpl.tink_id = "abc"
    assert tpl.metadata.annotations == {TEMPLATE_ID_ANNOTATION: "abc"}


def test_template_state_values():
    assert TemplateState("Error") is TemplateState.ERROR
    assert TemplateState("Ready") is TemplateState.READY
    with pytest.raises(ValueError):
        TemplateState("Unknown")


def test_spec_data_defaults_to_none():
    assert Template().spec.data is None
    assert Template().status == TemplateStatus(state=None)


def test_spec_holds_data():
    tpl = Template(spec=TemplateSpec(data='version: "0.1"'))
    assert tpl.spec.data == 'version: "0.1"'


def test_template_list_items():
    listing = TemplateList(items=[_already_set(), _no_annotations()])
    assert [t.tink_id for t in listing.items] == [ID, ""]