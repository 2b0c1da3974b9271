from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/presets", endpoint="presets")
    @login_required
    def presets():
        rows = container.preset_service.fetch_presets()
        return jsonify({"success": True, "presets": [p.to_dict() for p in rows]})

    @app.route("/api/presets", methods=["POST"], endpoint="add_preset")
    @login_required
    def add_preset():
        data = dict(json_body())
        preset = container.preset_service.add_preset(
            name=str(data.pop("name", None) or ""),
            segments=data.pop("segments", None) or [],
            extra=data,
        )
        return jsonify({"success": True, "preset": preset.to_dict()}), 201

    @app.route("/api/presets/<int:preset_id>", methods=["DELETE"], endpoint="delete_preset")
    @login_required
    def delete_preset(preset_id: int):
        container.preset_service.delete_preset(preset_id)
        return jsonify({"success": True, "message": "Preset deleted"})
