from flask import jsonify, request

from livevote.services.ballot import cast_ballot_from_payload
from livevote.services.registry import (
    get_participant,
    get_voter_by_voter_id,
    list_participants,
    list_party_members,
    voter_details,
)
from livevote.services.results import compute_results


def register_public_routes(app):
    @app.route("/api/participants")
    def participants_index():
        return jsonify([participant.to_dict() for participant in list_participants()])

    @app.route("/api/participants/<participant_id>")
    def participant_detail(participant_id):
        return jsonify(get_participant(participant_id).to_dict())

    @app.route("/api/party-members/<participant_id>")
    def party_members_index(participant_id):
        return jsonify([member.to_dict() for member in list_party_members(participant_id)])

    @app.route("/api/voters/check/<voter_id>")
    def check_voter(voter_id):
        return jsonify(voter_details(get_voter_by_voter_id(voter_id)))

    @app.route("/api/vote", methods=["POST"])
    def vote():
        voter, participant = cast_ballot_from_payload(request.get_json(silent=True) or {})
        return jsonify(
            {
                "message": "Vote cast successfully",
                "voter": voter.to_dict(),
                "participant": participant.to_dict(),
            }
        )

    @app.route("/api/results")
    def results():
        return jsonify(compute_results())
