from __future__ import annotations

from typing import Any, Dict, Mapping

DEFAULT_MANIFEST: Dict[str, Any] = {
    "name": "Shift Helper",
    "short_name": "Shifts",
    "description": "Simple staff shift scheduling",
    "theme_color": "#ffffff",
    "background_color": "#ffffff",
    "display": "standalone",
    "start_url": "/",
    "icons": [{"src": "favicon-ios.png", "sizes": "76x76", "type": "image/png"}],
}


def build_manifest(overrides: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    """Web app manifest; configured keys replace the defaults."""

    manifest = dict(DEFAULT_MANIFEST)
    for key, value in (overrides or {}).items():
        if value is not None:
            manifest[key] = value
    manifest["icons"] = [dict(icon) for icon in manifest.get("icons") or []]
    return manifest
