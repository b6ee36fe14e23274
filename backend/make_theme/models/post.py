from make_theme.extensions import db
from .base import BaseModel

class Post(BaseModel):
    __tablename__ = "posts"

    title = db.Column(db.String(200), nullable=False, default="")
    post_type = db.Column(db.String(50), nullable=False, default="page", index=True)  # page, post, product
    page_template = db.Column(db.String(200), nullable=True)  # template-builder.php for builder pages

    # Flat key/value metadata, unordered by contract
    meta = db.relationship(
        "PostMeta",
        back_populates="post",
        cascade="all, delete-orphan"
    )

    def get_meta(self, key, single=True):
        """
        Mirror of the host's get_post_meta(): the first stored value when
        single, otherwise every value stored under the key.
        """
        values = [m.meta_value for m in self.meta if m.meta_key == key]
        if single:
            return values[0] if values else None
        return values

    def meta_map(self):
        """
        All metadata as key -> list of values.
        """
        result = {}
        for m in self.meta:
            result.setdefault(m.meta_key, []).append(m.meta_value)
        return result
