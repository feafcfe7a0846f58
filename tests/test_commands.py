from sqlalchemy import inspect

from diet_tracker.extensions import db


def test_init_db_creates_tables(app):
    with app.app_context():
        db.drop_all()
        assert inspect(db.engine).get_table_names() == []

    result = app.test_cli_runner().invoke(args=["init-db"])
    assert result.exit_code == 0, result.output
    assert "Database tables created." in result.output

    with app.app_context():
        tables = set(inspect(db.engine).get_table_names())
    assert {"users", "food_entries", "photos"} <= tables
