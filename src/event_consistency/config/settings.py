"""
Configuration loader for the event consistency checker.

Loads alias rules from a YAML file validated against a JSON schema, with
environment variable overrides and built-in defaults.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema
import yaml

from event_consistency.comparison.comparator import DEFAULT_ALIAS_RULES, AliasRule
from event_consistency.exceptions import ConfigurationError
from event_consistency.utils.logger import LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL

logger = logging.getLogger(__name__)

# Path to alias rules YAML; unset means built-in defaults
ALIAS_CONFIG_ENV = "EVENT_CONSISTENCY_ALIAS_CONFIG"

ALIAS_SCHEMA_PATH = Path(__file__).resolve().parent / "aliases.schema.json"


class Settings:
    """
    Runtime settings: alias rules and log level.

    Environment variables are read per instance so tests and long-running
    hosts pick up changes without re-importing the module.
    """

    def __init__(
        self,
        alias_config_path: Optional[str] = None,
        log_level: Optional[str] = None,
        use_default_aliases: bool = True,
    ):
        """
        Initialize settings.

        Args:
            alias_config_path: Alias rules YAML; falls back to
                EVENT_CONSISTENCY_ALIAS_CONFIG
            log_level: Log level name; falls back to EVENT_CONSISTENCY_LOG_LEVEL
            use_default_aliases: When no alias file is configured, use
                DEFAULT_ALIAS_RULES (True) or no aliases at all (False)

        Raises:
            ConfigurationError: If the alias file cannot be loaded or is invalid
        """
        self.alias_config_path = alias_config_path or os.getenv(ALIAS_CONFIG_ENV) or None
        self.log_level = (log_level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
        self.alias_schema: Dict[str, Any] = {}

        if self.alias_config_path:
            self.alias_rules: Tuple[AliasRule, ...] = tuple(
                self.load_alias_rules(self.alias_config_path)
            )
        elif use_default_aliases:
            self.alias_rules = DEFAULT_ALIAS_RULES
        else:
            self.alias_rules = ()

    def load_alias_rules(
        self, config_path: str, schema_path: Optional[str] = None
    ) -> List[AliasRule]:
        """
        Load alias rules from YAML configuration and validate against schema.

        Args:
            config_path: Path to alias rules YAML file
            schema_path: Path to JSON schema (defaults to the bundled schema)

        Returns:
            Alias rules in file order

        Raises:
            ConfigurationError: If files are missing, unparsable, or the
                configuration fails schema validation
        """
        schema_file = Path(schema_path) if schema_path else ALIAS_SCHEMA_PATH

        # Load schema first
        try:
            with open(schema_file, "r", encoding="utf-8") as f:
                self.alias_schema = json.load(f)
                logger.debug(f"Loaded alias schema from {schema_file}")
        except FileNotFoundError as e:
            logger.error(f"Alias schema file not found: {schema_file}")
            raise ConfigurationError(f"Alias schema file not found: {schema_file}") from e
        except OSError as e:
            logger.error(f"Cannot read alias schema {schema_file}: {e}")
            raise ConfigurationError(f"Cannot read alias schema {schema_file}: {e}") from e
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in alias schema: {e}")
            raise ConfigurationError(f"Invalid JSON in {schema_file}: {e}") from e

        # Load and validate aliases
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                alias_config = yaml.safe_load(f)
        except FileNotFoundError as e:
            logger.error(f"Alias configuration file not found: {config_path}")
            raise ConfigurationError(f"Alias configuration file not found: {config_path}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read alias configuration {config_path}: {e}")
            raise ConfigurationError(f"Cannot read alias configuration {config_path}: {e}") from e
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in alias configuration: {e}")
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        if not alias_config:
            logger.warning(f"Empty alias configuration: {config_path}")
            return []

        try:
            jsonschema.validate(instance=alias_config, schema=self.alias_schema)
            logger.info("Alias configuration validated against schema")
        except jsonschema.ValidationError as e:
            logger.error(f"Alias configuration failed schema validation: {e.message}")
            raise ConfigurationError(f"Alias configuration validation failed: {e.message}") from e
        except jsonschema.SchemaError as e:
            logger.error(f"Alias schema is invalid: {e.message}")
            raise ConfigurationError(f"Alias schema is invalid: {e.message}") from e

        rules = [
            AliasRule(
                name_a=entry["event_a"],
                name_b=entry["event_b"],
                concept=entry.get("concept"),
            )
            for entry in alias_config.get("aliases", [])
        ]
        logger.info(f"Successfully loaded {len(rules)} alias rules from {config_path}")
        return rules
