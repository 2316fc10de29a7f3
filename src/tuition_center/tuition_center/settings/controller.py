from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, error_response, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    store = container.fee_policy_store

    @app.route("/api/settings", methods=["GET"], endpoint="api_settings_list")
    @api_errors("Không thể lấy cài đặt hệ thống")
    def api_settings_list():
        return jsonify([s.to_dict() for s in store.list_all()])

    @app.route("/api/settings", methods=["POST"], endpoint="api_settings_save")
    @api_errors("Không thể lưu cài đặt")
    def api_settings_save():
        data = json_body()
        if "value" not in data:
            return error_response("Thiếu giá trị cài đặt", 400)

        setting = store.upsert(str(data.get("key") or ""), str(data["value"]), data.get("description"))
        return jsonify(setting.to_dict()), 201

    @app.route("/api/settings/fee-calculation-method", methods=["GET"], endpoint="api_fee_method_get")
    @api_errors("Không thể lấy phương pháp tính học phí")
    def api_fee_method_get():
        return jsonify({"method": store.get_fee_calculation_method().value})

    @app.route("/api/settings/fee-calculation-method", methods=["PUT"], endpoint="api_fee_method_set")
    @api_errors("Không thể cập nhật phương pháp tính học phí")
    def api_fee_method_set():
        data = json_body()
        store.set_fee_calculation_method(data.get("method") or "")
        return jsonify({"method": store.get_fee_calculation_method().value})

    @app.route("/api/settings/<key>", methods=["GET"], endpoint="api_settings_get")
    @api_errors("Không thể lấy cài đặt")
    def api_settings_get(key: str):
        setting = store.get_setting(key)
        if setting is None:
            return error_response(f"Không tìm thấy cài đặt '{key}'", 404)
        return jsonify(setting.to_dict())

    @app.route("/api/settings/<key>", methods=["PUT"], endpoint="api_settings_update")
    @api_errors("Không thể cập nhật cài đặt")
    def api_settings_update(key: str):
        data = json_body()
        if "value" not in data:
            return error_response("Thiếu giá trị cài đặt", 400)
        return jsonify(store.update(key, str(data["value"])).to_dict())

    @app.route("/api/settings/<key>", methods=["DELETE"], endpoint="api_settings_delete")
    @api_errors("Không thể xóa cài đặt")
    def api_settings_delete(key: str):
        store.delete(key)
        return jsonify({"success": True, "key": key})
