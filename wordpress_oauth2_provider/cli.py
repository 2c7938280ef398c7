"""
CLI commands for the WordPress OAuth2 provider.

These commands help with setup and debugging of the WordPress OAuth2
integration. They are available as ``wordpress-oauth2`` and as
``flask wordpress-oauth2`` once the plugin is initialized.
"""

import click
import httpx

from .config import PluginConfig
from .exceptions import ConfigurationError
from .provider import WordPressProvider


@click.group("wordpress-oauth2")
def wordpress_oauth2_cli():
    """WordPress OAuth2 provider management commands."""
    pass


def _load_provider(config: PluginConfig) -> WordPressProvider:
    try:
        return WordPressProvider(config.to_provider_options())
    except ConfigurationError as e:
        raise click.ClickException(str(e))


@wordpress_oauth2_cli.command("show-config")
def show_config():
    """Display current WordPress OAuth2 configuration."""
    config = PluginConfig.from_env()

    click.echo("=== WordPress OAuth2 Configuration ===")
    click.echo(f"Provider Name: {config.name}")
    click.echo(f"Domain: {config.domain or 'Not configured'}")
    click.echo(f"Authorization URL override: {config.url_authorize or 'None'}")
    click.echo(f"Token URL override: {config.url_access_token or 'None'}")
    click.echo(f"User details URL override: {config.url_resource_owner_details or 'None'}")
    click.echo(f"Redirect URI: {config.redirect_uri}")
    click.echo(f"Scope: {config.scope or 'None'}")
    click.echo(f"Client ID: {config.client_id[:8] + '...' if config.client_id else 'Not configured'}")
    click.echo(f"Client Secret: {'Configured' if config.client_secret else 'Not configured'}")


@wordpress_oauth2_cli.command("validate-config")
def validate_config():
    """Validate the current configuration."""
    config = PluginConfig.from_env()
    errors = []
    warnings = []

    if not config.domain:
        errors.append("WORDPRESS_OAUTH2_DOMAIN not configured")
    if not config.client_id:
        errors.append("WORDPRESS_OAUTH2_CLIENT_ID not configured")
    if not config.client_secret:
        errors.append("WORDPRESS_OAUTH2_CLIENT_SECRET not configured")

    if config.domain and not config.domain.startswith("https://"):
        warnings.append("WORDPRESS_OAUTH2_DOMAIN does not use HTTPS")
    if not config.scope:
        warnings.append("WORDPRESS_OAUTH2_SCOPE not configured (WordPress has no default scopes)")

    if warnings:
        click.echo("=== Warnings ===")
        for warning in warnings:
            click.echo(f"  ! {warning}")

    if errors:
        click.echo("\n=== Errors ===")
        for error in errors:
            click.echo(f"  x {error}")
        raise click.ClickException(
            f"Configuration validation failed with {len(errors)} error(s)"
        )

    click.echo("\n[OK] Configuration is valid!")


@wordpress_oauth2_cli.command("authorize-url")
@click.option("--state", default=None, help="State value to embed in the URL")
def authorize_url(state):
    """Print the WordPress endpoints and an authorization URL."""
    provider = _load_provider(PluginConfig.from_env())

    click.echo(f"Authorization endpoint: {provider.base_authorization_url()}")
    click.echo(f"Token endpoint: {provider.base_access_token_url()}")
    click.echo(f"User details endpoint: {provider.resource_owner_details_url()}")

    url, state = provider.get_authorization_url(state=state)
    click.echo(f"\nAuthorization URL: {url}")
    click.echo(f"State: {state}")


@wordpress_oauth2_cli.command("test-connection")
def test_connection():
    """Test connectivity to the WordPress OAuth2 endpoints."""
    provider = _load_provider(PluginConfig.from_env())

    click.echo("=== Testing WordPress OAuth2 Connectivity ===\n")

    checks = [
        ("Authorization URL", "HEAD", provider.base_authorization_url()),
        ("Token URL", "POST", provider.base_access_token_url()),
        ("User details URL", "GET", provider.resource_owner_details_url()),
    ]
    with httpx.Client(follow_redirects=True, timeout=10) as client:
        for label, method, url in checks:
            # Any HTTP answer counts; the endpoints reject unauthenticated requests
            try:
                resp = client.request(method, url)
                click.echo(f"[OK] {label} reachable ({resp.status_code}): {url}")
            except httpx.HTTPError as e:
                click.echo(f"[FAIL] {label}: {e}")
