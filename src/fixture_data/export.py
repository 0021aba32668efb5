# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Export fixture data to JSON-compatible dicts and text.

Export format:
    {
        "metadata": {
            "timestamp": "2025-12-11T10:00:00.000000Z",
            "version": "0.1.0",
            "fixture_count": 1,
            "record_counts": {"users": 4},
        },
        "fixtures": {
            "users": [{"id": 1, "email": "...", "roles": [], "password": "..."}, ...],
        },
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

import yaml

from . import __version__
from .logging_setup import fixture_fields
from .registry import FixtureRegistry

logger = logging.getLogger(__name__)

# Type alias for fixture export format
FixtureExport = Dict[str, Any]

OUTPUT_FORMATS = ("json", "yaml")
DEFAULT_PASSWORD_MASK = "********"


def export_fixtures(
    registry: FixtureRegistry,
    names: Optional[Iterable[str]] = None,
    include_passwords: bool = True,
    password_mask: str = DEFAULT_PASSWORD_MASK,
) -> FixtureExport:
    """Export fixture records to a JSON-compatible dict.

    Records must provide to_dict(), as UserRecord does.

    Args:
        registry: Registry to read providers from.
        names: Fixture names to export. If None, exports every registered
               fixture in sorted order.
        include_passwords: If False, password values are replaced by
                           password_mask in the export.
        password_mask: Replacement text for masked passwords.

    Returns:
        Dictionary with "metadata" and "fixtures" sections.

    Raises:
        FixtureNotFoundError: If a requested name is not registered.
    """
    selected = registry.names() if names is None else list(names)

    fixtures: Dict[str, List[Dict[str, Any]]] = {}
    for name in selected:
        records = [record.to_dict() for record in registry.get(name).get_data()]
        if not include_passwords:
            for record in records:
                if "password" in record:
                    record["password"] = password_mask
        fixtures[name] = records
        logger.debug(
            f"Exported fixture '{name}'",
            extra=fixture_fields(
                fixture=name, records=len(records), passwords_masked=not include_passwords
            ),
        )

    return {
        "metadata": {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "version": __version__,
            "fixture_count": len(fixtures),
            "record_counts": {name: len(records) for name, records in fixtures.items()},
        },
        "fixtures": fixtures,
    }


def dump_export(export: FixtureExport, output_format: str = "json", indent: int = 2) -> str:
    """Serialize an export to text.

    Args:
        export: Export produced by export_fixtures().
        output_format: "json" or "yaml".
        indent: Indentation width.

    Raises:
        ValueError: If output_format is not supported.
    """
    if output_format == "json":
        return json.dumps(export, indent=indent)
    if output_format == "yaml":
        # YAML requires an indent of at least 2
        return yaml.safe_dump(export, indent=max(indent, 2), sort_keys=False)
    raise ValueError(
        f"Unsupported output format '{output_format}', expected one of {OUTPUT_FORMATS}"
    )
