import copy
from collections import Counter

import pytest

from codekata.logger import Logger, log_from, main

NAMES = [
    f"{cls}::{fn}"
    for cls in ("ClassA", "ClassB", "ClassC")
    for fn in ("func1", "func2", "func3")
]


def test_instance_is_shared(capsys):
    first = Logger.instance()
    second = Logger.instance()
    assert first is second
    second.log("shared")
    assert capsys.readouterr().out == "Log: shared\n"


def test_direct_construction_refused():
    with pytest.raises(TypeError):
        Logger()


def test_log_writes_prefixed_line(capsys):
    Logger.instance().log("hello")
    assert capsys.readouterr().out == "Log: hello\n"


def test_log_from_joins_names(capsys):
    log_from("ClassA", "func1")
    assert capsys.readouterr().out == "Log: ClassA::func1\n"


def test_main_logs_from_each_thread(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    numbers = [int(line) for line in lines if not line.startswith("Log: ")]
    logged = [line[len("Log: "):] for line in lines if line.startswith("Log: ")]
    assert len(numbers) == len(logged) == 5
    assert all(0 <= n < len(NAMES) for n in numbers)
    assert Counter(logged) == Counter(NAMES[n] for n in numbers)


def test_main_thread_count(capsys):
    assert main(["--threads", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    logged = [line for line in lines if line.startswith("Log: ")]
    assert len(logged) == 3
    assert all(line[len("Log: "):] in NAMES for line in logged)