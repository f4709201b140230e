import pytest

from philo.cli import main

RULE = "-" * 73


@pytest.mark.parametrize("argv", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: <philo> <number of philosophers>")
    assert RULE not in out


@pytest.mark.parametrize(
    "argv",
    [
        ["0", "100", "10", "10"],
        ["abc", "100", "10", "10"],
        ["2", "-5", "10", "10"],
        ["2", "100", "10", "-1"],
        ["2", "100", "10", "10", "-3"],
        ["+", "100", "10", "10"],
    ],
)
def test_invalid_arguments_fail(argv, capsys):
    assert main(argv) == 1
    out = capsys.readouterr().out
    assert out.strip() == "Could not parse arguments"


def test_lonely_philosopher_dies(capsys):
    assert main(["1", "40", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == RULE
    assert lines[-1] == RULE
    assert lines.count(RULE) == 2
    assert any(line.endswith("philosopher 1 took his fork") for line in lines)
    assert any(line.endswith(" 1 died") for line in lines)
    assert not any(line.startswith("I am philosopher") for line in lines)


def test_everyone_fed_prints_report(capsys):
    assert main(["2", "800", "10", "10", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines.count(RULE) == 2
    assert not any(line.endswith("died") for line in lines)
    report = lines[lines.index(RULE, 1) + 1:]
    assert "I am philosopher ID: 1" in report
    assert "I am philosopher ID: 2" in report
    assert report.count("I ate enough") == 2
    assert "I did not eat enough" not in report


def test_eating_lines_name_each_philosopher(capsys):
    main(["2", "800", "10", "10", "1"])
    lines = capsys.readouterr().out.splitlines()
    eaters = {line.split()[1] for line in lines if line.endswith("is eating")}
    assert eaters == {"1", "2"}
    for line in lines:
        if line.endswith("is eating"):
            assert int(line.split()[0]) >= 0