from datetime import datetime

from livevote.extensions import db

MEMBER_TYPES = ("direct", "proportional")


class PartyMember(db.Model):
    __tablename__ = "party_members"

    id = db.Column(db.Integer, primary_key=True)
    participant_id = db.Column(
        db.Integer, db.ForeignKey("participants.id"), nullable=False, index=True
    )
    member_name = db.Column(db.String(200), nullable=False)
    member_name_nepali = db.Column(db.String(200), nullable=True)
    position = db.Column(db.String(200), nullable=False)
    position_nepali = db.Column(db.String(200), nullable=True)
    ward_number = db.Column(db.Integer, nullable=True)
    # "direct" or "proportional"
    type = db.Column(db.String(20), nullable=False)
    vote_count = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "participantId": self.participant_id,
            "memberName": self.member_name,
            "memberNameNepali": self.member_name_nepali,
            "position": self.position,
            "positionNepali": self.position_nepali,
            "wardNumber": self.ward_number,
            "type": self.type,
            "voteCount": self.vote_count,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
