from flask import current_app

from livevote.extensions import socketio


@socketio.on("connect")
def handle_connect():
    current_app.logger.info("Client connected")


@socketio.on("disconnect")
def handle_disconnect(*args):
    current_app.logger.info("Client disconnected")
