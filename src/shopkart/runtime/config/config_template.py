"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.shopkart.runtime.config.config_data import ConfigData
from src.shopkart.runtime.config.settings import EnvironmentVariables


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match):
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        # Handle error messages: ${VAR:?message}
        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        # Handle required variables: ${VAR}
        else:
            value = os.getenv(var_expr)
            if value is None:
                raise ValueError(f"Required environment variable {var_expr} not set")
            return value

    pattern = re.compile(r"\$\{([^}]+)\}")
    # Comment lines are kept verbatim
    return "".join(
        line if line.lstrip().startswith("#") else pattern.sub(replacer, line)
        for line in text.splitlines(keepends=True)
    )


def apply_environment_overrides(env_mode: str) -> list[str]:
    """Promote ``<ENV_MODE>_NAME`` variables to ``NAME``.

    Returns the names of the variables that were set.
    """
    prefix = f"{env_mode.upper()}_"
    promoted = []
    for var_name, var_value in list(os.environ.items()):
        if not var_name.startswith(prefix):
            continue
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        promoted.append(new_var_name)
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)
    return promoted


def load_templated_yaml(
    file_path: Path, env_settings: EnvironmentVariables | None = None
) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_settings: Environment settings selecting the override prefix

    Returns:
        Parsed configuration with environment variables substituted

    Raises:
        ValueError: If required environment variables are missing or the
            YAML does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    env_mode = (env_settings or EnvironmentVariables()).app_environment
    logger.info("Loading configuration for environment: {}", env_mode)

    promoted = apply_environment_overrides(env_mode)
    if promoted:
        logger.info("Applied environment-specific overrides: {}", promoted)

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not isinstance(loaded, dict):
        raise ValueError("Failed to parse YAML: expected a mapping at the top level")

    try:
        config_data = loaded.get("config") or {}
        return ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
