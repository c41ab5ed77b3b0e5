"""Tests for multistack.toml loading."""

from pathlib import Path

import pytest

from multistack.cli.config import MultiStackConfig, load_config, merge_overrides
from multistack.core.errors import InvalidConfigurationError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    """No multistack.toml means one stack over ten slots."""
    config = load_config(tmp_path)

    assert config == MultiStackConfig(number_of_stacks=1, capacity=10)


def test_load_config_reads_values(tmp_path: Path) -> None:
    (tmp_path / "multistack.toml").write_text(
        "[multistack]\nnumber_of_stacks = 3\ncapacity = 12\n", encoding="utf-8"
    )

    config = load_config(tmp_path)

    assert config == MultiStackConfig(number_of_stacks=3, capacity=12)


def test_load_config_fills_missing_keys_with_defaults(tmp_path: Path) -> None:
    (tmp_path / "multistack.toml").write_text("[multistack]\ncapacity = 4\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config == MultiStackConfig(number_of_stacks=1, capacity=4)


def test_load_config_without_section_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "multistack.toml").write_text('title = "unrelated"\n', encoding="utf-8")

    assert load_config(tmp_path) == MultiStackConfig(number_of_stacks=1, capacity=10)


@pytest.mark.parametrize(
    "body",
    [
        "[multistack]\ncapacity = 0\n",
        '[multistack]\nnumber_of_stacks = "3"\n',
        "[multistack]\nnumber_of_stacks = true\n",
        "[multistack]\ncapacity = 2.5\n",
        "multistack = 3\n",
        "[multistack\ncapacity = 4\n",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, body: str) -> None:
    (tmp_path / "multistack.toml").write_text(body, encoding="utf-8")

    with pytest.raises(InvalidConfigurationError):
        load_config(tmp_path)


def test_merge_overrides_prefers_explicit_values() -> None:
    base = MultiStackConfig(number_of_stacks=3, capacity=12)

    assert merge_overrides(base, number_of_stacks=None, capacity=None) == base
    assert merge_overrides(base, number_of_stacks=2, capacity=None) == MultiStackConfig(
        number_of_stacks=2, capacity=12
    )
    assert merge_overrides(base, number_of_stacks=None, capacity=5) == MultiStackConfig(
        number_of_stacks=3, capacity=5
    )
