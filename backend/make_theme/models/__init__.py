from .post import Post
from .post_meta import PostMeta
from .theme_mod import ThemeMod
from .user import User
