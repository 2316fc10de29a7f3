from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date
from ..common.http import api_errors, error_response
from ..container import Container
from .formatting import format_payment_cycle


def register(app: Flask, container: Container) -> None:
    @app.route("/api/billing/quote", methods=["GET"], endpoint="api_billing_quote")
    @api_errors("Không thể tính học phí")
    def api_billing_quote():
        quote = container.billing_service.quote(request.args.get("fee"), request.args.get("cycle"))
        return jsonify(
            {
                "method": quote.method.value,
                "baseFee": quote.base_fee,
                "total": quote.total,
                "display": quote.display,
            }
        )

    @app.route("/api/billing/window", methods=["GET"], endpoint="api_billing_window")
    @api_errors("Không thể tính chu kỳ thanh toán")
    def api_billing_window():
        cycle = request.args.get("cycle") or ""
        sessions_s = request.args.get("completedSessions") or "0"
        if not sessions_s.isdigit():
            return error_response("Số buổi đã học không hợp lệ", 400)

        window = container.billing_service.billing_window(request.args.get("start") or "", cycle, int(sessions_s))
        return jsonify(
            {
                "start": format_iso_date(window.start_date),
                "end": format_iso_date(window.end_date),
                "cycle": cycle,
                "cycleLabel": format_payment_cycle(cycle),
                "completedSessions": window.completed_sessions,
                "remainingSessions": window.remaining_sessions,
            }
        )
