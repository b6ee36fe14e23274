from make_theme.extensions import db
from .base import BaseModel

class ThemeMod(BaseModel):
    __tablename__ = "theme_mods"

    name = db.Column(db.String(200), unique=True, nullable=False, index=True)
    value = db.Column(db.JSON(none_as_null=True), nullable=True)
