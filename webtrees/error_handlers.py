"""
Shared error handlers for the Flask application
"""

from flask import jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from webtrees.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)


def _wants_json() -> bool:
    return request.is_json or request.path.startswith('/api/')


def register_error_handlers(app_or_blueprint):
    """Register error handlers for Flask app or blueprint"""

    @app_or_blueprint.errorhandler(403)
    def forbidden_error(error):
        """Handle 403 errors"""
        logger.warning(f"403 error: {request.url}")

        if _wants_json():
            return jsonify({'error': 'Access denied'}), 403

        return render_template('errors/403.html'), 403

    @app_or_blueprint.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors"""
        logger.warning(f"404 error: {request.url}")

        if _wants_json():
            return jsonify({'error': 'Resource not found'}), 404

        return render_template('errors/404.html'), 404

    @app_or_blueprint.errorhandler(405)
    def method_not_allowed_error(error):
        """Handle 405 errors"""
        logger.warning(f"405 error: {request.method} {request.url}")

        if _wants_json():
            return jsonify({'error': 'Method not allowed'}), 405

        return render_template('errors/405.html'), 405

    @app_or_blueprint.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors"""
        logger.error(f"500 error: {request.url} - {str(error)}")

        if _wants_json():
            return jsonify({'error': 'Internal server error'}), 500

        return render_template('errors/500.html'), 500

    @app_or_blueprint.errorhandler(Exception)
    def handle_exception(error):
        """Handle all other exceptions"""
        if isinstance(error, HTTPException):
            return error

        logger.error(f"Unhandled exception: {request.url} - {str(error)}", exc_info=True)

        if _wants_json():
            return jsonify({'error': 'An unexpected error occurred'}), 500

        # The error page itself may fail to render
        try:
            return render_template('errors/500.html'), 500
        except Exception:
            return "<h1>Internal Server Error</h1><p>An unexpected error occurred.</p>", 500
