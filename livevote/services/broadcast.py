from flask import current_app

from livevote.extensions import socketio
from livevote.services.results import live_snapshot

RESULTS_EVENT = "voteUpdate"


def broadcast_results():
    """Push the current leaderboard to every connected client.

    The mutation that triggered the push has already committed, so a failure
    here is logged and otherwise ignored.
    """
    try:
        payload = live_snapshot()
        socketio.emit(RESULTS_EVENT, payload)
    except Exception:
        current_app.logger.exception("Broadcast error")
        return False
    return True
