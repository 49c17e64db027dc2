from flask import Flask

from qbtrust.cli import register_commands
from qbtrust.config import Config
from qbtrust.extensions import db, migrate
from qbtrust.routes import register_routes


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    db.init_app(app)
    migrate.init_app(app, db)

    register_routes(app)
    register_commands(app)
    return app


__all__ = ["create_app", "db", "migrate"]
