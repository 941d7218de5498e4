import logging

import pytest

from tinkcore.reconcile import Controller, Result, retry_if_error

LOGGER_NAME = "tinkcore.test.reconcile"


def test_no_error_does_not_requeue(caplog):
    logger = logging.getLogger(LOGGER_NAME)
    with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
        result = retry_if_error(None, logger)
    assert result == Result(requeue=False)
    assert caplog.records == []


def test_single_error_requeues_and_logs(caplog):
    logger = logging.getLogger(LOGGER_NAME)
    with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
        result = retry_if_error(ValueError("boom"), logger)
    assert result.requeue is True
    assert [r.getMessage() for r in caplog.records] == ["Failed reconciliation, boom"]


def test_exception_group_logs_each_error(caplog):
    logger = logging.getLogger(LOGGER_NAME)
    group = ExceptionGroup("many", [ValueError("first"), KeyError("second")])
    with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
        result = retry_if_error(group, logger)
    assert result.requeue is True
    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 2
    assert messages[0] == "Failed reconciliation, first"
    assert "second" in messages[1]


def test_nested_exception_group_is_flattened(caplog):
    logger = logging.getLogger(LOGGER_NAME)
    group = ExceptionGroup(
        "outer", [ValueError("a"), ExceptionGroup("inner", [ValueError("b")])]
    )
    with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
        retry_if_error(group, logger)
    assert [r.getMessage() for r in caplog.records] == [
        "Failed reconciliation, a",
        "Failed reconciliation, b",
    ]


def test_default_logger_is_used(caplog):
    with caplog.at_level(logging.ERROR):
        result = retry_if_error(RuntimeError("oops"))
    assert result.requeue is True
    assert any(r.getMessage() == "Failed reconciliation, oops" for r in caplog.records)


def test_controller_is_abstract():
    with pytest.raises(TypeError):
        Controller()


def test_controller_subclass_reconciles():
    class Echo(Controller):
        def __init__(self):
            self.seen = []

        def reconcile(self, request):
            self.seen.append(request)
            return Result(requeue=request == "again")

    controller = Echo()
    assert controller.reconcile("again") == Result(requeue=True)
    assert controller.reconcile("done") == Result()
    assert controller.seen == ["again", "done"]