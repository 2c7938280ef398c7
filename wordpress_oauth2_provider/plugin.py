"""
Flask extension for the WordPress OAuth2 provider.

Loads the configuration, builds the provider and registers the blueprint
and CLI commands on a Flask application.
"""

import logging
from typing import Optional

from flask import Flask

from .blueprint import EXTENSION_NAME, wordpress_bp
from .cli import wordpress_oauth2_cli
from .config import PluginConfig
from .provider import WordPressProvider

logger = logging.getLogger(__name__)


class WordPressOAuth2Plugin:
    """
    WordPress OAuth2 login for Flask applications.

    Usage::

        app = Flask(__name__)
        WordPressOAuth2Plugin(app)
    """

    def __init__(self, app: Flask = None, config: Optional[PluginConfig] = None):
        """
        Initialize the plugin.

        Args:
            app: Flask application instance (optional, can call init_app later)
            config: Plugin configuration; read from the environment if omitted
        """
        self.app = app
        self.config = config
        self.provider: Optional[WordPressProvider] = None

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask):
        """
        Initialize the plugin with a Flask application.

        Args:
            app: Flask application instance
        """
        self.app = app

        if self.config is None:
            self.config = PluginConfig.from_env()

        if not app.config.get("SECRET_KEY"):
            logger.warning(
                "Flask SECRET_KEY not set. The OAuth2 state cannot be kept in the session."
            )

        if self.config.domain:
            self.provider = WordPressProvider(self.config.to_provider_options())
            logger.info(f"WordPress OAuth2 provider initialized for {self.config.domain}")
        else:
            logger.warning("WordPress OAuth2 not configured - WORDPRESS_OAUTH2_DOMAIN not set")

        app.extensions[EXTENSION_NAME] = {
            "config": self.config,
            "provider": self.provider,
        }
        app.register_blueprint(self.get_blueprint())
        app.cli.add_command(wordpress_oauth2_cli)

    def get_blueprint(self):
        """Return the Flask blueprint for this extension."""
        return wordpress_bp

    @staticmethod
    def get_name() -> str:
        """Return the plugin name."""
        return "wordpress-oauth2"

    @staticmethod
    def get_version() -> str:
        """Return the plugin version."""
        from . import __version__
        return __version__
