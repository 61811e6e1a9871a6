"""
Blog Admin Console - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, g, redirect, session, url_for
from admin_console.extensions import db
from admin_console.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config, auth_client_factory=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        auth_client_factory: callable(config, storage) returning an auth
            client; defaults to the Supabase client

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)

    # Register blueprints
    from admin_console.auth import auth_bp
    from admin_console.blog import blog_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(blog_bp, url_prefix='/admin/blog')

    _init_session_provider(app, auth_client_factory)

    @app.route('/')
    def index():
        return redirect(url_for('blog.list_posts'))

    # Expose the session to templates
    @app.context_processor
    def inject_auth():
        auth = g.get('auth')
        return dict(
            current_admin=auth.user if auth is not None and auth.is_authenticated else None,
        )

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') \
                and ':memory:' not in app.config['SQLALCHEMY_DATABASE_URI']:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()
        _ensure_default_data(app)

    return app


def _init_session_provider(app, auth_client_factory):
    """Mount a SessionProvider for every request and release it afterwards."""
    from admin_console.auth.policy import policy_from_config
    from admin_console.auth.provider import SessionProvider
    from admin_console.services import client_from_config, notify

    factory = auth_client_factory or client_from_config
    policy = policy_from_config(app.config)

    @app.before_request
    def mount_session_provider():
        client = factory(app.config, session)
        g.auth = SessionProvider(client, policy=policy, notify=notify).mount()

    @app.teardown_request
    def unmount_session_provider(exc):
        provider = g.pop('auth', None)
        if provider is not None:
            provider.unmount()


def _ensure_default_data(app):
    """Ensure the configured admin emails exist in admin_users."""
    from admin_console.models import AdminUser
    from sqlalchemy.exc import SQLAlchemyError

    emails = app.config.get('ADMIN_EMAILS') or []
    existing = {a.email for a in AdminUser.query.filter(AdminUser.email.in_(emails)).all()}
    missing = [e for e in emails if e not in existing]
    if not missing:
        return

    try:
        for email in missing:
            db.session.add(AdminUser(email=email))
        db.session.commit()
        logger.info("Created admin users: %s", ', '.join(missing))
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Could not create admin users: %s", e)
