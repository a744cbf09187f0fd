"""
Tests for the frame-loop timing helpers and the hybrid logger
"""

import logging

from conftest import FakeClock
from utils import DeferredCalls, HybridLogger, OnceInMs


def test_deferred_calls_run_in_due_order():
    calls = DeferredCalls()
    ran = []
    calls.call_at(300, lambda: ran.append("c"))
    calls.call_at(100, lambda: ran.append("a"))
    calls.call_at(100, lambda: ran.append("b"))

    assert calls.run_due(99) == 0
    assert calls.run_due(100) == 2
    assert ran == ["a", "b"]
    assert len(calls) == 1

    assert calls.run_due(1000) == 1
    assert ran == ["a", "b", "c"]


def test_deferred_call_may_schedule_another():
    calls = DeferredCalls()
    ran = []

    def first():
        ran.append("first")
        calls.call_at(50, lambda: ran.append("already due"))
        calls.call_at(500, lambda: ran.append("later"))

    calls.call_at(10, first)
    calls.run_due(100)

    assert ran == ["first", "already due"]
    assert len(calls) == 1


def test_cancel_all():
    calls = DeferredCalls()
    ran = []
    calls.call_at(0, lambda: ran.append(1))
    calls.cancel_all()

    assert calls.run_due(10) == 0
    assert ran == []


def test_once_in_ms_throttles():
    clock = FakeClock()
    once = OnceInMs(1000, clock)

    assert once.should_execute()
    assert not once.should_execute()
    clock.advance(999)
    assert not once.should_execute()
    clock.advance(1)
    assert once.should_execute()


def test_class_logger_format_and_level(capsys):
    main_logger = HybridLogger("UtilsTest", log_dir=None)
    logger = main_logger.get_class_logger("Board", logging.INFO)
    logger.debug("hidden")
    logger.info("shown")
    child = logger.create_class_logger("Child")
    child.warning("careful")
    main_logger.cleanup()

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[INFO] [Board] shown" in out
    assert "[WARNING] [Child] careful" in out


def test_error_with_exception_names_its_type(tmp_path):
    main_logger = HybridLogger("UtilsFileTest", log_dir=str(tmp_path), console=False)
    logger = main_logger.get_class_logger("Main")
    try:
        raise KeyError("missing")
    except KeyError as e:
        logger.error("lookup failed", exception=e)
    main_logger.cleanup()

    log_files = list(tmp_path.glob("UtilsFileTest_*.log"))
    assert len(log_files) == 1
    content = log_files[0].read_text(encoding="utf-8")
    assert "[ERROR] [Main] lookup failed | Type: KeyError" in content
