import inspect

import pytest

from tracelog.infrastructure.caller import resolve_caller
from tracelog.models import UNKNOWN_CALLER


def describe_me():
    return resolve_caller()


def describe_my_caller():
    return resolve_caller(1)


def test_skip_zero_is_calling_function():
    info = describe_me()
    assert info.function_name.endswith(".describe_me")
    assert info.file_path.endswith("test_caller.py")


def test_skip_one_is_callers_caller():
    expected_line = inspect.currentframe().f_lineno + 1
    info = describe_my_caller()
    assert info.function_name.endswith(".test_skip_one_is_callers_caller")
    assert info.line_number == expected_line


def test_function_name_is_module_qualified():
    info = describe_me()
    assert info.function_name.split(".")[-2:] == ["test_caller", "describe_me"]


def test_methods_use_qualified_name():
    class Service:
        def handle(self):
            return resolve_caller()

    info = Service().handle()
    assert info.function_name.endswith("Service.handle")


def test_stack_too_shallow_returns_unknown():
    assert resolve_caller(10_000) is UNKNOWN_CALLER


def test_negative_skip_rejected():
    with pytest.raises(ValueError):
        resolve_caller(-1)
