from __future__ import annotations

import logging
import os
import sqlite3

from flask import Flask, jsonify, request
from marshmallow import ValidationError
from sqlalchemy import event
from sqlalchemy.engine import Engine
from werkzeug.exceptions import HTTPException

from .errors import PetCareError
from .extensions import db, csrf
from .storage import SqlStore
from .validation import RowIdConverter, describe_errors


@event.listens_for(Engine, "connect")
def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        cur = dbapi_connection.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.execute("PRAGMA journal_mode=WAL")
        cur.execute("PRAGMA synchronous=NORMAL")
        cur.execute("PRAGMA busy_timeout=30000")
        cur.close()


def create_app(config_object: str | type = "config.Config") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.sort_keys = False
    app.json.ensure_ascii = False
    app.url_map.converters["row_id"] = RowIdConverter

    os.makedirs(app.instance_path, exist_ok=True)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]",
    )

    uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if uri.startswith("sqlite:"):
        opts = dict(app.config.get("SQLALCHEMY_ENGINE_OPTIONS", {}))
        ca = dict(opts.get("connect_args", {}))
        ca.setdefault("check_same_thread", False)
        ca.setdefault("timeout", 30)
        opts["connect_args"] = ca
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = opts

    db.init_app(app)
    csrf.init_app(app)

    from .models.owner import Owner
    from .models.pet import Pet
    from .models.vaccine import Vaccine
    from .models.care_event import CareEvent

    from .owners.services import OwnerService
    from .pets.services import PetService
    from .vaccines.services import VaccineService
    from .care_events.services import CareEventService

    # every service shares one storage client bound to the request-scoped session
    store = SqlStore(db.session)
    app.services = {
        "owners": OwnerService(store),
        "pets": PetService(store),
        "vaccines": VaccineService(store),
        "care_events": CareEventService(store),
    }

    from .owners.routes import owners_bp
    from .pets.routes import pets_bp
    from .vaccines.routes import vaccines_bp
    from .care_events.routes import care_events_bp

    for bp in (owners_bp, pets_bp, vaccines_bp, care_events_bp):
        csrf.exempt(bp)
        app.register_blueprint(bp)

    from .web.routes import web_bp
    app.register_blueprint(web_bp, url_prefix="/app")

    from .cli import (
        init_db_cmd,
        reset_db_cmd,
        purge_data_cmd,
        seed_demo_cmd,
        seed_small_cmd,
    )

    app.cli.add_command(init_db_cmd)
    app.cli.add_command(reset_db_cmd)
    app.cli.add_command(purge_data_cmd)
    app.cli.add_command(seed_demo_cmd)
    app.cli.add_command(seed_small_cmd)

    @app.get("/")
    def index():
        return jsonify({"message": "PetCare Tracker API running"})

    @app.errorhandler(ValidationError)
    def handle_validation_error(err):
        response = {
            "error_code": "VALIDATION_ERROR",
            "message": describe_errors(err),
            "details": err.messages,
        }
        return jsonify(response), 400

    @app.errorhandler(PetCareError)
    def handle_petcare_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        if request.path == "/app" or request.path.startswith("/app/"):
            return err
        response = {"error_code": err.name.upper().replace(" ", "_"), "message": err.description}
        return jsonify(response), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {
            "error_code": "INTERNAL_SERVER_ERROR",
            "message": "Unexpected server error",
        }
        return jsonify(response), 500

    @app.context_processor
    def inject_helpers():
        from .web import display
        from .web.routes import VIEWS

        return dict(
            views=VIEWS,
            species_icon=display.species_icon,
            species_chip_class=display.species_chip_class,
            condition_chip_class=display.condition_chip_class,
            owner_name=display.owner_name,
            or_dash=display.or_dash,
        )

    @app.teardown_request
    def _teardown_request(_exc):
        try:
            if _exc is not None:
                db.session.rollback()
        finally:
            db.session.remove()

    logging.info(f"PetCare Tracker app created ({app.config['SQLALCHEMY_DATABASE_URI']})")
    return app
