import tomllib
from dataclasses import dataclass
from pathlib import Path

from multistack.core.errors import InvalidConfigurationError
from multistack.core.multi_stack import (
    DEFAULT_CAPACITY,
    DEFAULT_NUMBER_OF_STACKS,
    validate_positive_int,
)

CONFIG_FILE_NAME = "multistack.toml"


@dataclass(frozen=True)
class MultiStackConfig:
    """In-memory representation of `multistack.toml`.

    Example multistack.toml:
      [multistack]
      number_of_stacks = 3
      capacity = 10
    """

    number_of_stacks: int
    capacity: int


def load_config(config_dir: Path) -> MultiStackConfig:
    """Load multistack.toml from the given directory if present; otherwise return defaults.

    Missing keys fall back to the defaults individually.

    Raises:
        InvalidConfigurationError: If the file is not valid TOML, `multistack`
            is not a table, or a value is not a positive integer
    """
    cfg_path = config_dir / CONFIG_FILE_NAME
    if not cfg_path.exists():
        return MultiStackConfig(number_of_stacks=DEFAULT_NUMBER_OF_STACKS, capacity=DEFAULT_CAPACITY)

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigurationError(f"{cfg_path} is not valid TOML: {e}") from e

    section = data.get("multistack", {})
    if not isinstance(section, dict):
        raise InvalidConfigurationError(
            f"[multistack] must be a table, got {type(section).__name__}"
        )
    number_of_stacks = section.get("number_of_stacks", DEFAULT_NUMBER_OF_STACKS)
    capacity = section.get("capacity", DEFAULT_CAPACITY)
    return MultiStackConfig(
        number_of_stacks=validate_positive_int("number_of_stacks", number_of_stacks),
        capacity=validate_positive_int("capacity", capacity),
    )


def merge_overrides(
    config: MultiStackConfig,
    *,
    number_of_stacks: int | None,
    capacity: int | None,
) -> MultiStackConfig:
    """Apply command-line overrides on top of file config. None keeps the file value."""
    return MultiStackConfig(
        number_of_stacks=config.number_of_stacks if number_of_stacks is None else number_of_stacks,
        capacity=config.capacity if capacity is None else capacity,
    )
