import logging

from flask_migrate import upgrade

from livevote import create_app, socketio
from livevote.services.admins import ensure_bootstrap_admin

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app()


if __name__ == "__main__":
    with app.app_context():
        upgrade()
        ensure_bootstrap_admin()

    port = app.config["PORT"]
    app.logger.info("Server running on port %s", port)
    socketio.run(app, host="0.0.0.0", port=port)
