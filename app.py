#!/usr/bin/env python3
"""
webtrees - Flask application factory with CLI commands and web interface
"""

import os

from flask import Flask

from webtrees.blueprints.blocks import blocks
from webtrees.blueprints.main import main
from webtrees.blueprints.media import media
from webtrees.blueprints.tree import tree_bp
from webtrees.commands import register_commands
from webtrees.database import init_app as init_database
from webtrees.error_handlers import register_error_handlers
from webtrees.shared.csrf import get_csrf_token


class Config:
    """Configuration class for Flask app with required environment variables"""

    def __init__(self):
        # Flask configuration
        self.secret_key = self._require_env('SECRET_KEY')

        # Database configuration
        self.sqlalchemy_database_uri = self._require_env('DATABASE_URL')
        self.sqlalchemy_track_modifications = False

    def _require_env(self, var_name: str) -> str:
        """Require environment variable or raise error"""
        value = os.environ.get(var_name)
        if not value:
            raise RuntimeError(f"Required environment variable {var_name} is not set")
        return value


def create_app(config=None):
    """Application factory"""
    # Templates and static files live inside the webtrees package
    app = Flask('webtrees')

    if config is None:
        config = Config()

    app.config['SECRET_KEY'] = config.secret_key
    app.config['SQLALCHEMY_DATABASE_URI'] = config.sqlalchemy_database_uri
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = config.sqlalchemy_track_modifications

    # Register blueprints
    app.register_blueprint(main)
    app.register_blueprint(tree_bp)
    app.register_blueprint(blocks)
    app.register_blueprint(media)

    # Initialize database
    init_database(app)

    # Register error handlers and CLI commands
    register_error_handlers(app)
    register_commands(app)

    app.jinja_env.globals['csrf_token'] = get_csrf_token

    return app


def main_cli():
    """CLI entry point"""
    app = create_app()

    print("webtrees - online genealogy")
    print("=" * 50)
    print("Access the interface at: http://localhost:5000")
    print()

    app.run(debug=True, host='0.0.0.0', port=5000)


if __name__ == '__main__':
    main_cli()
