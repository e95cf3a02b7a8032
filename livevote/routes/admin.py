from flask import jsonify, request
from flask_login import login_required

from livevote.services.registry import (
    create_participant,
    create_party_member,
    delete_participant,
    delete_party_member,
    list_voters,
    register_voter,
    update_participant,
    update_party_member,
    voter_details,
)


def _json_body():
    return request.get_json(silent=True) or {}


def register_admin_routes(app):
    @app.route("/api/participants", methods=["POST"])
    @login_required
    def create_participant_route():
        participant = create_participant(_json_body())
        return (
            jsonify(
                {
                    "message": "Participant registered successfully",
                    "participant": participant.to_dict(),
                }
            ),
            201,
        )

    @app.route("/api/participants/<participant_id>", methods=["PUT"])
    @login_required
    def update_participant_route(participant_id):
        participant = update_participant(participant_id, _json_body())
        return jsonify(
            {
                "message": "Participant updated successfully",
                "participant": participant.to_dict(),
            }
        )

    @app.route("/api/participants/<participant_id>", methods=["DELETE"])
    @login_required
    def delete_participant_route(participant_id):
        deleted_members = delete_participant(participant_id)
        return jsonify(
            {
                "message": "Participant deleted successfully",
                "deletedMembers": deleted_members,
            }
        )

    @app.route("/api/party-members", methods=["POST"])
    @login_required
    def create_party_member_route():
        member = create_party_member(_json_body())
        return (
            jsonify({"message": "Party member added successfully", "member": member.to_dict()}),
            201,
        )

    @app.route("/api/party-members/<member_id>", methods=["PUT"])
    @login_required
    def update_party_member_route(member_id):
        member = update_party_member(member_id, _json_body())
        return jsonify(
            {"message": "Party member updated successfully", "member": member.to_dict()}
        )

    @app.route("/api/party-members/<member_id>", methods=["DELETE"])
    @login_required
    def delete_party_member_route(member_id):
        delete_party_member(member_id)
        return jsonify({"message": "Party member deleted successfully"})

    @app.route("/api/voters/register", methods=["POST"])
    @login_required
    def register_voter_route():
        voter = register_voter(_json_body())
        return (
            jsonify({"message": "Voter registered successfully", "voter": voter.to_dict()}),
            201,
        )

    @app.route("/api/voters")
    @login_required
    def list_voters_route():
        return jsonify([voter_details(voter) for voter in list_voters()])
