from livevote.models.admin import Admin
from livevote.models.candidate_vote import CandidateVote
from livevote.models.participant import Participant
from livevote.models.party_member import MEMBER_TYPES, PartyMember
from livevote.models.voter import Voter

__all__ = [
    "Admin",
    "Participant",
    "PartyMember",
    "Voter",
    "CandidateVote",
    "MEMBER_TYPES",
]
