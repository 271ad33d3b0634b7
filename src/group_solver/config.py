"""
Configuration loading for the group solver.

Reads a TOML document, validates its shape with pydantic and hands the
name-keyed tables to the domain model builder.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    DEFAULT_GROUP_SIZE,
    DEFAULT_MAX_SOLUTIONS,
    DEFAULT_TOTAL,
    tomllib,
)
from .core.model import GroupModel, build_model
from .errors import ConfigError

logger = logging.getLogger(__name__)


class SelectionParams(BaseModel):
    """Run parameters of the selection problem."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    group_size: int = Field(DEFAULT_GROUP_SIZE, alias="group-size", ge=0)
    total: int = Field(DEFAULT_TOTAL, ge=0)
    max_solutions: int = Field(DEFAULT_MAX_SOLUTIONS, alias="max-solutions", ge=0)


class Limits(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    avoid_grouping: List[List[str]] = Field(default_factory=list, alias="avoid-grouping")
    ignore_group: List[str] = Field(default_factory=list, alias="ignore-group")


class GroupConfig(BaseModel):
    """
    Validated configuration document.

    Attributes:
        names: The item universe
        props: Group name to member item names
        limits: Optional avoid-grouping sets and ignored groups
        params: Selection parameters
    """

    model_config = ConfigDict(extra="forbid")

    names: List[str]
    props: Dict[str, List[str]]
    limits: Limits = Field(default_factory=Limits)
    params: SelectionParams = Field(default_factory=SelectionParams)

    def to_model(self) -> GroupModel:
        """Build the canonical domain model from this configuration."""
        return build_model(
            self.names,
            self.props,
            avoid_grouping=self.limits.avoid_grouping,
            ignore_groups=self.limits.ignore_group,
        )


def parse_config(data: Mapping[str, Any]) -> GroupConfig:
    """
    Validate an already-parsed configuration mapping.

    Args:
        data: Nested mapping, e.g. the result of ``tomllib.loads``

    Returns:
        The validated configuration

    Raises:
        ConfigError: If the mapping does not match the expected schema
    """
    try:
        return GroupConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}") from e


def loads_config(text: str) -> GroupConfig:
    """Parse and validate a TOML configuration string."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e
    return parse_config(data)


def load_config(path: Union[str, Path]) -> GroupConfig:
    """
    Read and validate a TOML configuration file.

    Args:
        path: Location of the TOML file

    Returns:
        The validated configuration

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read configuration {path}: {e}") from e

    config = loads_config(text)
    logger.info(f"Configuration loaded from: {path}")
    return config


def override_params(params: SelectionParams, **overrides: Optional[int]) -> SelectionParams:
    """
    Return ``params`` with every non-None override applied.

    Raises:
        ConfigError: If an override is out of range
    """
    values = params.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return SelectionParams.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid parameters:\n{e}") from e
