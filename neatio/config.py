"""Configuration defaults and presets.

Configs are plain dicts; every consumer reads keys with ``config.get(key,
default)`` so partial dicts are always accepted.

Keys:
    yaml_sort_keys: emit YAML mapping keys in sorted order (reference layout)
    yaml_indent: YAML indentation width
    yaml_flow_style: PyYAML ``default_flow_style`` (False = block style)
    pickle_protocol: protocol for the experiment value stream
    report_precision: decimals for averaged values in statistics reports
"""

from __future__ import annotations

import pickle
from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    'yaml_sort_keys': True,
    'yaml_indent': 2,
    'yaml_flow_style': False,
    'pickle_protocol': pickle.DEFAULT_PROTOCOL,
    'report_precision': 1,
}

PRESET_STANDARD: dict[str, Any] = dict(DEFAULT_CONFIG)

# Smaller on-disk artifacts: flow-style YAML and the newest pickle protocol
PRESET_COMPACT: dict[str, Any] = {
    **DEFAULT_CONFIG,
    'yaml_flow_style': None,
    'pickle_protocol': pickle.HIGHEST_PROTOCOL,
}


def resolve_config(config: dict[str, Any] | None = None) -> dict[str, Any]:
    """Overlay ``config`` on the defaults and return a fresh dict."""
    merged = dict(DEFAULT_CONFIG)
    if config:
        merged.update(config)
    return merged


__all__ = ['DEFAULT_CONFIG', 'PRESET_STANDARD', 'PRESET_COMPACT', 'resolve_config']
