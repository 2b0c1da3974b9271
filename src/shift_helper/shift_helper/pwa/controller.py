from __future__ import annotations

import json

from flask import Flask, Response

from .manifest import build_manifest


def register(app: Flask) -> None:
    @app.route("/manifest.webmanifest", endpoint="manifest")
    def manifest():
        body = json.dumps(build_manifest(app.config.get("PWA_MANIFEST")), ensure_ascii=False)
        return Response(body, mimetype="application/manifest+json")
