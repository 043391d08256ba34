import click
from flask import current_app
from weave_content.extensions import db
from weave_content.models.user import User
from weave_content.utils.transaction import transactional


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables (development only; use `flask db upgrade` elsewhere)."""
        db.create_all()
        click.echo("Database initialised")

    @app.cli.command("create-admin")
    @click.argument("email")
    @click.password_option()
    def create_admin(email, password):
        """Create an admin user, or promote and reset an existing one."""
        user = User.query.filter_by(email=email).first()

        with transactional():
            if user is None:
                user = User()
                user.email = email
                db.session.add(user)
            user.role = "admin"
            user.is_active = True
            user.set_password(password)

        current_app.logger.info("Admin user ready: %s", email)
        click.echo(f"Admin {email} ready")
