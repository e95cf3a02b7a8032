"""Error taxonomy shared by the services and the HTTP layer.

Services raise these; ``create_app`` registers handlers that turn them into
``{"error": ...}`` JSON responses with the class's status code.
"""


class LiveVoteError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(LiveVoteError):
    status_code = 400
    message = "Invalid request"

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or self.message)

    def to_dict(self):
        return {"error": self.message, "details": self.errors}


class DuplicateKey(LiveVoteError):
    status_code = 409
    message = "Record already exists"


class NotFound(LiveVoteError):
    status_code = 404
    message = "Not found"


class VoterNotFound(NotFound):
    message = "Voter not registered"


class PartyNotFound(NotFound):
    message = "Participant not found"


class AlreadyVoted(LiveVoteError):
    status_code = 403
    message = "You have already voted. Each voter can vote only once."


class Unauthorized(LiveVoteError):
    status_code = 401
    message = "Authentication required"
