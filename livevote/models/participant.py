from datetime import datetime

from livevote.extensions import db


class Participant(db.Model):
    __tablename__ = "participants"

    id = db.Column(db.Integer, primary_key=True)
    party_name = db.Column(db.String(200), unique=True, nullable=False)
    party_name_nepali = db.Column(db.String(200), nullable=True)
    party_symbol = db.Column(db.String(200), nullable=True)
    party_logo = db.Column(db.String(500), nullable=True)
    description = db.Column(db.Text, nullable=True)
    vote_count = db.Column(db.Integer, nullable=False, default=0)
    direct_seats = db.Column(db.Integer, nullable=False, default=0)
    proportional_seats = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    members = db.relationship(
        "PartyMember", backref="participant", lazy=True, cascade="all, delete-orphan"
    )

    def to_dict(self):
        return {
            "id": self.id,
            "partyName": self.party_name,
            "partyNameNepali": self.party_name_nepali,
            "partySymbol": self.party_symbol,
            "partyLogo": self.party_logo,
            "description": self.description,
            "voteCount": self.vote_count,
            "directSeats": self.direct_seats,
            "proportionalSeats": self.proportional_seats,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
