"""Tests for the demo command."""

from click.testing import CliRunner

from multistack.cli.cli import cli


def test_demo_prints_sample_scenario() -> None:
    """Demo output follows the three-stack sample run line by line."""
    runner = CliRunner()
    result = runner.invoke(cli, ["demo"])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "insert 1 into stack 1",
        "insert 2 into stack 1",
        "insert 3 into stack 1",
        "insert 4 into stack 1",
        "insert 5 into stack 1 failed: Stack 1 has no free slots left (capacity: 10)",
        "insert 1 into stack 2",
        "insert 2 into stack 2",
        "insert 1 into stack 3",
        "pop stack 2 -> 2",
        "pop stack 2 -> 1",
        "pop stack 2 -> None",
        "storage: [1, None, 1, 2, None, None, 3, None, None, 4]",
        "peek stack 1 -> 4",
        "peek stack 2 -> None",
        "peek stack 3 -> 1",
    ]
