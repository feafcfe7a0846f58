import click
from flask import Flask
from flask.cli import with_appcontext

from diet_tracker.extensions import db


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all database tables.

    Run ``flask --app diet_tracker init-db`` once on a fresh database when
    not using migrations.
    """
    db.create_all()
    click.echo("Database tables created.")


def register_commands(app: Flask) -> None:
    app.cli.add_command(init_db_command)
