"""
Flask blueprint for WordPress OAuth2 authentication.

This blueprint provides the following endpoints:
- GET /auth/login - Initiate the WordPress authorization flow
- GET /auth/callback - OAuth2 callback (receives authorization code)
- GET /auth/logout - Clear session and logout
- GET /auth/me - Details of the logged in WordPress user
- GET /auth/info - Information about the configured provider
"""

import logging

from authlib.integrations.base_client import OAuthError
from flask import (
    current_app,
    jsonify,
    redirect,
    request,
    session,
    url_for,
)
from flask_smorest import Blueprint

from .config import PluginConfig
from .exceptions import WordPressOAuth2Error
from .provider import WordPressProvider

logger = logging.getLogger(__name__)

EXTENSION_NAME = "wordpress_oauth2"

# Session keys
STATE_KEY = "wordpress_oauth2_state"
RETURN_URL_KEY = "wordpress_oauth2_return_url"
USER_KEY = "wordpress_user"

wordpress_bp = Blueprint(
    "wordpress_oauth2",
    __name__,
    url_prefix="/auth",
    description="WordPress OAuth2 authentication endpoints"
)


def get_config() -> PluginConfig:
    """Get the plugin configuration of the current app."""
    return current_app.extensions[EXTENSION_NAME]["config"]


def get_provider() -> WordPressProvider:
    """Get the provider of the current app."""
    return current_app.extensions[EXTENSION_NAME]["provider"]


@wordpress_bp.route("/login")
def login():
    """
    Initiate the WordPress authorization flow.

    Query Parameters:
        next: URL to redirect to after successful login (optional)
    """
    config = get_config()
    provider = get_provider()

    if provider is None:
        return jsonify({
            "error": "WordPress OAuth2 not configured",
            "message": "WORDPRESS_OAUTH2_DOMAIN is not set"
        }), 500

    authorization_url, state = provider.get_authorization_url()
    session[STATE_KEY] = state
    session[RETURN_URL_KEY] = request.args.get("next", config.login_success_redirect)

    logger.info("Initiating WordPress login, redirecting to provider")
    return redirect(authorization_url)


@wordpress_bp.route("/callback")
def callback():
    """
    OAuth2 callback endpoint.

    Receives the authorization code from WordPress, exchanges it for an
    access token and loads the user details.
    """
    config = get_config()
    provider = get_provider()

    state = request.args.get("state")
    stored_state = session.pop(STATE_KEY, None)
    if provider is None or not state or state != stored_state:
        logger.warning("WordPress OAuth2 state mismatch")
        return redirect(config.login_error_redirect)

    error = request.args.get("error")
    if error:
        error_description = request.args.get("error_description", "Unknown error")
        logger.error(f"WordPress OAuth2 error: {error} - {error_description}")
        return redirect(config.login_error_redirect)

    code = request.args.get("code")
    if not code:
        logger.error("No authorization code received")
        return redirect(config.login_error_redirect)

    try:
        token = provider.get_access_token(code=code)
        owner = provider.get_resource_owner(token)
    except (WordPressOAuth2Error, OAuthError) as e:
        logger.error(f"WordPress authentication failed: {e}")
        return redirect(config.login_error_redirect)
    except Exception as e:
        logger.exception(f"Error processing WordPress OAuth2 callback: {e}")
        return redirect(config.login_error_redirect)

    session[USER_KEY] = {
        "id": owner.id,
        "username": owner.username,
        "email": owner.email,
        "link": owner.link,
        "avatar_url": owner.avatar_url(),
    }

    logger.info(f"User {owner.username} authenticated successfully via {config.name}")
    return redirect(session.pop(RETURN_URL_KEY, config.login_success_redirect))


@wordpress_bp.route("/logout")
def logout():
    """Logout and clear session."""
    session.clear()
    logger.info("User logged out")
    return redirect(get_config().frontend_url)


@wordpress_bp.route("/me")
def me():
    """Return the logged in WordPress user."""
    user = session.get(USER_KEY)
    if not user:
        return jsonify({
            "error": "Not authenticated",
            "login_url": url_for("wordpress_oauth2.login", _external=True),
        }), 401
    return jsonify(user)


@wordpress_bp.route("/info")
def auth_info():
    """
    Return information about the configured WordPress provider.

    This endpoint can be used by the frontend to display login options.
    """
    config = get_config()

    return jsonify({
        "provider": config.name,
        "domain": config.domain,
        "login_url": url_for("wordpress_oauth2.login", _external=True),
        "configured": config.is_configured,
    })
