from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, parse_iso_date, today_local
from ..common.http import api_errors, json_body
from ..container import Container
from .formatting import summarize_attendance


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_mark")
    @api_errors("Lỗi khi tạo điểm danh mới")
    def api_attendance_mark():
        data = json_body()
        record = container.attendance_recorder.mark_attendance(
            data.get("studentId"),
            data.get("status"),
            data.get("date"),
        )
        return jsonify(record.to_dict()), 201

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_by_date")
    @api_errors("Lỗi khi lấy dữ liệu điểm danh")
    def api_attendance_by_date():
        day = parse_iso_date(request.args.get("date") or "")
        return jsonify([r.to_dict() for r in container.attendance_repo.list_for_date(day)])

    @app.route("/api/attendance/student/<int:student_id>", methods=["GET"], endpoint="api_attendance_student")
    @api_errors("Lỗi khi lấy dữ liệu điểm danh")
    def api_attendance_student(student_id: int):
        return jsonify(container.attendance_recorder.history(student_id))

    @app.route("/api/attendance/today", methods=["GET"], endpoint="api_attendance_today")
    @api_errors("Lỗi khi lấy dữ liệu điểm danh hôm nay")
    def api_attendance_today():
        day_s = request.args.get("date")
        day = parse_iso_date(day_s) if day_s else None
        return jsonify(container.today_attendance_service.build(day).to_dict())

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="api_attendance_summary")
    @api_errors("Lỗi khi thống kê điểm danh")
    def api_attendance_summary():
        day_s = request.args.get("date")
        day = parse_iso_date(day_s) if day_s else today_local()
        summary = summarize_attendance(container.attendance_repo.list_for_date(day))
        return jsonify(dict(summary.to_dict(), date=format_iso_date(day)))
