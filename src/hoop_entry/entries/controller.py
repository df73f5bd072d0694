from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import as_bool
from ..core.exceptions import ValidationError
from ..container import Container
from .service import EntryForm


def _request_data() -> dict:
    if request.is_json:
        return request.get_json(silent=True) or {}
    return request.form.to_dict()


def register(app: Flask, container: Container) -> None:
    @app.route("/api/entries", methods=["GET"], endpoint="list_entries")
    def list_entries():
        entries = container.ledger.entries
        return jsonify({"success": True, "count": len(entries), "entries": [e.to_dict() for e in entries]})

    @app.route("/api/entries", methods=["POST"], endpoint="create_entry")
    def create_entry():
        try:
            form = EntryForm.from_mapping(_request_data())
            decision = container.entry_service.submit(form)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("entry submission failed")
            return jsonify({"success": False, "message": "System error while processing entry"}), 500

        app.logger.info("checked in: %s ticket (%s)", decision.ticket_type.value, decision.price)
        return jsonify({
            "success": True,
            "message": f"{decision.ticket_type.value} ticket processed successfully",
            "ticket": {"ticketType": decision.ticket_type.value, "ticketPrice": decision.price},
        }), 201

    @app.route("/api/tickets/preview", methods=["GET"], endpoint="preview_ticket")
    def preview_ticket():
        decision = container.entry_service.preview(
            request.args.get("age"),
            request.args.get("isStudent"),
            request.args.get("studentCardVerified"),
        )
        if decision is None:
            return jsonify({"success": True, "ticket": None})
        return jsonify({
            "success": True,
            "ticket": {"ticketType": decision.ticket_type.value, "ticketPrice": decision.price},
        })

    @app.route("/api/entries/reset", methods=["POST"], endpoint="reset_entries")
    def reset_entries():
        confirmed = as_bool(_request_data().get("confirm"))
        try:
            container.entry_service.reset(confirmed=confirmed)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        app.logger.info("all entries have been reset")
        return jsonify({"success": True, "message": "All entries have been reset"})
