"""
Model: GirlMedia
Table: girls_media

Therapist profile media awaiting or past moderation. Pending files live in
the tmp-uploads bucket, approved ones in girls-media. Hosted videos keep
their uid under meta.cloudflare.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class GirlMedia(db.Model):
    """ One photo, video or live photo... """

    # Table Name
    __tablename__ = "girls_media"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = False, index = True)

    kind = db.Column(db.String(20), nullable = False, doc = "image | video | live_photo")

    provider = db.Column(db.String(20), nullable = False, default = "storage", doc = "storage | cloudflare")

    storage_key = db.Column(db.Text, nullable = True)

    thumb_key = db.Column(db.Text, nullable = True)

    meta = db.Column(db.JSON, nullable = False, default = dict)

    min_user_level = db.Column(db.Integer, nullable = False, default = 0)

    sort_order = db.Column(db.Integer, nullable = False, default = 0)

    status = db.Column(db.String(20), nullable = False, default = "pending", index = True)

    reviewed_by = db.Column(db.String(36), nullable = True)

    reviewed_at = db.Column(db.DateTime(timezone = True), nullable = True)

    reject_reason = db.Column(db.Text, nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    girl = db.relationship("Girl", lazy = "joined")

    def __repr__(self):
        return f"<GirlMedia {self.id} {self.kind} {self.status}>"
