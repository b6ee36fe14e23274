from .section import normalize_sections

def normalize_post(post, sections=None, admin=False):
    data = {
        "id": post.id,
        "title": post.title,
        "post_type": post.post_type,
        "page_template": post.page_template,
    }

    if sections is not None:
        data["sections"] = normalize_sections(sections)

    if admin:
        data["meta"] = post.meta_map()
        data["updated_at"] = post.updated_at.isoformat() if post.updated_at else None

    return data
