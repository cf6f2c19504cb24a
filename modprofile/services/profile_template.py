from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from string import Template

from modprofile.utils.constants import JSON_SUFFIX

# $-placeholders so the JSON braces need no escaping.
_PROFILE_TEMPLATE = Template(
    """{
  "_meta": {
    "description": "Profile metadata and information",
    "author": $author,
    "created": $timestamp,
    "version": "1.0",
    "tags": ["custom", "modification"]
  },
  "_input": {
    "profileName": "New Custom Profile",
    "description": "Description of what this profile does",
    "gameVersion": "Current",
    "sourceFileName": "UniteDescriptor.ndf",
    "createdBy": $author,
    "createdDate": $timestamp,
    "lastModified": $timestamp,
    "modifications": [
      {
        "unitName": "Example_Unit_Name",
        "propertyPath": "ModulesDescriptors[*].MaxPhysicalDamages",
        "oldValue": "100",
        "oldValueType": "NUMBER",
        "newValue": "150",
        "newValueType": "NUMBER",
        "modificationType": "DIRECT_EDIT",
        "modificationDetails": "Increased health by 50%"
      }
    ]
  }
}"""
)


def create_profile_template(current_user: str, now: datetime) -> str:
    """
    Build the starter profile: a ``_meta`` block describing the profile and an
    ``_input`` block holding one example modification.

    ``now`` is rendered as an ISO-8601 local date-time without offset.
    """
    timestamp = now.replace(tzinfo=None).isoformat()
    return _PROFILE_TEMPLATE.substitute(
        author=json.dumps(current_user, ensure_ascii=False),
        timestamp=json.dumps(timestamp),
    )


def ensure_json_suffix(path: Path) -> Path:
    """
    Append ``.json`` unless the file name already ends with it (case-sensitive).
    Raises ValueError for paths without a file name, such as ``/``.
    """
    if not path.name:
        raise ValueError(f"{str(path)!r} has no file name")
    if path.name.endswith(JSON_SUFFIX):
        return path
    return path.with_name(path.name + JSON_SUFFIX)
