from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from qbtrust.extensions import db
from qbtrust.routes.admin import register_admin_routes
from qbtrust.routes.quarterbacks import register_quarterback_routes
from qbtrust.services.errors import InvalidVoteDirection, QuarterbackNotFound


def register_error_handlers(app):
    @app.errorhandler(QuarterbackNotFound)
    def quarterback_not_found(error):
        return jsonify({"error": "Quarterback not found"}), 404

    @app.errorhandler(InvalidVoteDirection)
    def invalid_vote_direction(error):
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(SQLAlchemyError)
    def database_error(error):
        db.session.rollback()
        current_app.logger.exception("Database error")
        return jsonify({"error": "Database error"}), 500


def register_routes(app):
    register_error_handlers(app)
    register_quarterback_routes(app)
    register_admin_routes(app)
