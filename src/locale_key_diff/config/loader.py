"""Loading of run inputs from the CI environment and command line."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import structlog
from pydantic import ValidationError

from ..errors import ConfigurationError
from .settings import ActionInputs

logger = structlog.get_logger(__name__)

REQUIRED_INPUTS = ("shared_folder_paths", "compare_locales")


def input_env_name(name: str) -> str:
    """Environment variable the CI runner uses for input ``name``."""
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, env: Mapping[str, str], required: bool = False) -> str:
    """Read one input, trimmed; an empty value counts as not supplied."""
    value = env.get(input_env_name(name), "").strip()
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}", config_key=name)
    return value


def is_debug_enabled(env: Mapping[str, str]) -> bool:
    return env.get("RUNNER_DEBUG") == "1" or env.get("ACTIONS_STEP_DEBUG", "").lower() == "true"


def parse_shared_folder_paths(raw: str) -> Any:
    """Parse the shared folder list from inline JSON or from a JSON file path."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Shared folder paths are not inline JSON, reading as file", path=raw)

    try:
        return json.loads(Path(raw).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(
            f"shared_folder_paths is neither JSON nor a readable JSON file: {raw} ({e})",
            config_key="shared_folder_paths",
            previous_error=e,
        ) from e


def parse_compare_locales(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"compare_locales is not valid JSON: {raw}",
            config_key="compare_locales",
            previous_error=e,
        ) from e


def load_inputs(
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Dict[str, Optional[str]]] = None,
) -> ActionInputs:
    """Collect and validate all run inputs.

    Args:
        env: Environment to read ``INPUT_*`` variables from (defaults to ``os.environ``)
        overrides: Raw input values that win over the environment when not ``None``

    Raises:
        ConfigurationError: If a required input is missing or malformed
    """
    env = dict(os.environ if env is None else env)
    for name, value in (overrides or {}).items():
        if value is not None:
            env[input_env_name(name)] = value

    raw: Dict[str, str] = {
        name: get_input(name, env, required=name in REQUIRED_INPUTS)
        for name in ("shared_folder_paths", "default_locale", "default_base", "compare_base", "compare_locales")
    }
    logger.debug("Raw inputs", **raw)

    shared_folder_paths = parse_shared_folder_paths(raw["shared_folder_paths"])
    compare_locales = parse_compare_locales(raw["compare_locales"])

    try:
        return ActionInputs(
            shared_folder_paths=shared_folder_paths,
            default_locale=raw["default_locale"] or "en",
            default_base=raw["default_base"],
            compare_base=raw["compare_base"],
            compare_locales=compare_locales,
            debug=is_debug_enabled(env),
        )
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else None
        if field == "shared_folder_paths":
            message = (
                "Base locale folders JSON is not an array of arrays with at least one "
                f"entry in each array: {raw['shared_folder_paths']}"
            )
        elif field == "compare_locales":
            message = "Array of comparison locale folder names not provided."
        else:
            message = first["msg"]
        raise ConfigurationError(message, config_key=field, previous_error=e) from e
