from __future__ import annotations

import logging
import os
from pathlib import Path

import click
from flask import Flask, jsonify

from adapters.config_loader import load_config
from config import CONFIG, CONFIG_ENV_VAR
from domain.errors import NotFoundError, ValidationError
from domain.intervals import parse_date_range
from services import db as db_service
from services import reports_service
from services.shift_service import ShiftConflictError

logger = logging.getLogger(__name__)

BLUEPRINTS = [
    ("blueprints.employees.routes", "bp"),
    ("blueprints.absences.routes", "bp"),
    ("blueprints.shifts.routes", "bp"),
    ("blueprints.calendar.routes", "bp"),
    ("blueprints.reports.routes", "bp"),
]


def configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format=app.config.get("LOG_FORMAT"))
    logging.getLogger().setLevel(level)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(exc: ValidationError):
        return jsonify(exc.as_dict()), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(exc: NotFoundError):
        return jsonify(exc.as_dict()), 404

    @app.errorhandler(ShiftConflictError)
    def handle_conflict(exc: ShiftConflictError):
        return jsonify(exc.as_dict()), 409

    @app.errorhandler(db_service.DatabaseError)
    def handle_database(exc: db_service.DatabaseError):
        logger.error("database error: %s", exc, exc_info=exc)
        return jsonify({"error": "database", "message": str(exc)}), 500


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(CONFIG)
    app.json.sort_keys = False

    config_path = os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        app.config.update(load_config(config_path))

    if test_config:
        app.config.update(test_config)

    Path(app.instance_path).mkdir(parents=True, exist_ok=True)
    database = app.config["DATABASE"]
    if database != ":memory:" and not os.path.isabs(database):
        app.config["DATABASE"] = os.path.join(app.instance_path, database)

    configure_logging(app)
    register_error_handlers(app)

    for import_path, attr in BLUEPRINTS:
        module = __import__(import_path, fromlist=[attr])
        blueprint = getattr(module, attr)
        app.register_blueprint(blueprint)

    @app.route("/healthz")
    def healthcheck() -> tuple[str, int]:
        return "OK", 200

    app.teardown_appcontext(db_service.close_db)

    @app.cli.command("init-db")
    def init_db_command() -> None:
        """Initialize the SQLite schema and seed data."""
        db_service.initialize_schema()
        if app.config.get("SEED_DB", True):
            db_service.seed_database()
        click.echo("Database initialized.")

    @app.cli.command("export-stats")
    @click.option("--start", required=True, help="First day of the window, YYYY-MM-DD.")
    @click.option("--end", required=True, help="Last day of the window, YYYY-MM-DD.")
    @click.option("--employee-id", type=int, default=None)
    @click.option("--format", "fmt", type=click.Choice(["csv", "xlsx"]), default="csv")
    @click.option("--output", type=click.Path(dir_okay=False), default=None)
    def export_stats_command(start: str, end: str, employee_id: int | None, fmt: str, output: str | None) -> None:
        """Write shift and absence statistics for a date window to a file."""
        try:
            date_range = parse_date_range(start, end)
        except ValidationError as exc:
            raise click.BadParameter(str(exc)) from exc
        if fmt == "xlsx":
            buffer, filename = reports_service.export_statistics_xlsx(date_range, employee_id)
            Path(output or filename).write_bytes(buffer.getvalue())
        else:
            buffer, filename = reports_service.export_statistics_csv(date_range, employee_id)
            Path(output or filename).write_text(buffer.getvalue(), encoding="utf-8")
        click.echo(f"Wrote {output or filename}")

    if app.config.get("AUTO_INIT_DB", True):
        with app.app_context():
            db_service.initialize_schema()
            if app.config.get("SEED_DB", True):
                db_service.seed_database()

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
