from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import utc_today
from ..container import Container
from .export import entries_to_csv, entries_to_xlsx, export_filename


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        limit = request.args.get("limit", type=int)
        data = container.report_service.build_dashboard(recent_limit=limit)
        return jsonify({"success": True, **asdict(data)})

    @app.route("/api/analytics", methods=["GET"], endpoint="analytics")
    def analytics():
        data = container.report_service.build_analytics()
        return jsonify({"success": True, **asdict(data)})

    @app.route("/export.csv", methods=["GET"], endpoint="export_csv")
    def export_csv():
        content = entries_to_csv(container.ledger.entries)
        filename = export_filename(utc_today(), "csv")
        return app.response_class(
            content.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/export.xlsx", methods=["GET"], endpoint="export_xlsx")
    def export_xlsx():
        try:
            payload = entries_to_xlsx(container.ledger.entries)
        except Exception:
            app.logger.exception("xlsx export failed")
            return jsonify({"success": False, "message": "Export failed"}), 500

        return send_file(
            io.BytesIO(payload),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=export_filename(utc_today(), "xlsx"),
        )
