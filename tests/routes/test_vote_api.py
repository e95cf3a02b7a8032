def _admin_post(client, auth_headers, path, payload):
    response = client.post(path, json=payload, headers=auth_headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_full_election_scenario(client, auth_headers):
    red = _admin_post(client, auth_headers, "/api/participants", {"partyName": "Red"})["participant"]
    assert red["voteCount"] == 0
    _admin_post(
        client,
        auth_headers,
        "/api/voters/register",
        {"voterId": "V1", "voterName": "Sita", "citizenshipNumber": "12-34"},
    )

    vote = client.post("/api/vote", json={"voterId": "V1", "partyId": red["id"]})
    assert vote.status_code == 200
    assert vote.get_json()["message"] == "Vote cast successfully"

    results = client.get("/api/results").get_json()
    assert results["participants"][0]["partyName"] == "Red"
    assert results["participants"][0]["voteCount"] == 1
    assert results["totalVotes"] == 1
    assert results["turnoutPercentage"] == "100.00"


def test_second_vote_is_rejected(client, make_participant, make_voter):
    red = make_participant("Red")
    blue = make_participant("Blue")
    make_voter("V1")
    red_id, blue_id = red.id, blue.id

    assert client.post("/api/vote", json={"voterId": "V1", "partyId": red_id}).status_code == 200
    second = client.post("/api/vote", json={"voterId": "V1", "partyId": blue_id})

    assert second.status_code == 403
    assert "already voted" in second.get_json()["error"]
    assert client.get(f"/api/participants/{red_id}").get_json()["voteCount"] == 1
    assert client.get(f"/api/participants/{blue_id}").get_json()["voteCount"] == 0


def test_vote_for_unknown_party(client, make_voter):
    make_voter("V1")

    response = client.post("/api/vote", json={"voterId": "V1", "partyId": 404})

    assert response.status_code == 404
    assert response.get_json() == {"error": "Participant not found"}
    assert client.get("/api/voters/check/V1").get_json()["hasVoted"] is False


def test_vote_by_unregistered_voter(client, make_participant):
    red = make_participant("Red")

    response = client.post("/api/vote", json={"voterId": "ghost", "partyId": red.id})

    assert response.status_code == 404
    assert response.get_json() == {"error": "Voter not registered"}


def test_vote_requires_voter_and_party(client):
    response = client.post("/api/vote", json={})

    assert response.status_code == 400
    assert response.get_json()["details"] == ["Voter ID is required", "Party ID is required"]


def test_vote_rejects_structured_voter_id(client, make_participant, make_voter):
    red = make_participant("Red")
    make_voter("V1")

    response = client.post("/api/vote", json={"voterId": {"id": "V1"}, "partyId": red.id})

    assert response.status_code == 400
    assert response.get_json()["details"] == ["Voter ID must be text"]
    assert client.get("/api/voters/check/V1").get_json()["hasVoted"] is False


def test_vote_with_candidates(client, make_participant, make_member, make_voter):
    red = make_participant("Red")
    asha = make_member(red, "Asha")
    make_voter("V1")
    red_id, asha_id = red.id, asha.id

    response = client.post(
        "/api/vote", json={"voterId": "V1", "partyId": red_id, "candidateIds": [asha_id, 999]}
    )

    assert response.status_code == 200
    assert response.get_json()["voter"]["votedForCandidates"] == [
        {"memberId": asha_id, "position": "Mayor", "memberName": "Asha"}
    ]
    members = client.get(f"/api/party-members/{red_id}").get_json()
    assert members[0]["voteCount"] == 1


def test_results_without_voters(client):
    results = client.get("/api/results").get_json()

    assert results == {
        "participants": [],
        "totalVotes": 0,
        "totalRegisteredVoters": 0,
        "turnoutPercentage": 0,
    }


def test_unknown_route_returns_json_error(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert "error" in response.get_json()
