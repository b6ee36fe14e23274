from make_theme.extensions import db
from .base import BaseModel

class PostMeta(BaseModel):
    __tablename__ = "post_meta"

    post_id = db.Column(db.String(36), db.ForeignKey("posts.id"), nullable=False)
    meta_key = db.Column(db.String(255), nullable=False, index=True)
    meta_value = db.Column(db.JSON(none_as_null=True), nullable=True)

    post = db.relationship("Post", back_populates="meta")

    __table_args__ = (
        db.Index("idx_post_meta_post_key", "post_id", "meta_key"),
    )
