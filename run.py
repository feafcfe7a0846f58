import atexit

from diet_tracker import create_app, shutdown_storage

app = create_app()
atexit.register(shutdown_storage, app)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"])
