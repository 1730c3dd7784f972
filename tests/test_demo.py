import logging

import pytest

from paracurve.demo import demo_lines, main


def test_demo_lines():
    lines = demo_lines()
    assert len(lines) == 3
    assert lines[0].startswith("R=1, (0.0; 0.0), pi: {0.866")
    assert lines[1].startswith("R=5, (5.0; 5.0), pi: {9.33")
    assert lines[2].startswith("GetDerivate: ")
    assert float(lines[2].split(": ")[1]) == pytest.approx(-1.0)


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == demo_lines()


def test_main_verbose_logs_debug(capsys, caplog):
    with caplog.at_level(logging.DEBUG, logger="paracurve.demo"):
        assert main(["--verbose"]) == 0
    assert "Sample curves" in caplog.text
