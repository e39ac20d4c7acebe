"""
Configuration schema for template-sync.

This module defines the expected structure of the template.json file
found at the root of a project.
"""

import jsonschema
from typing import Dict, Any


CONFIG_SCHEMA = {
    "type": "object",
    "required": ["source"],
    "properties": {
        "source": {
            "type": "string",
            "minLength": 1,
            "description": "Repository locator passed to git clone"
        },
        "ignore": {
            "type": ["array", "null"],
            "items": {"type": "string"},
            "description": "Extra basenames excluded from the file copy"
        },
        "json": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Path of the file relative to the project root"
                    },
                    "ignoreKeys": {
                        "type": ["array", "null"],
                        "items": {"type": "string"},
                        "description": "Top-level keys each side keeps for itself"
                    }
                }
            }
        }
    }
}


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate the configuration against the schema.

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid, raises jsonschema.ValidationError otherwise
    """
    jsonschema.validate(instance=config, schema=CONFIG_SCHEMA)
    return True
