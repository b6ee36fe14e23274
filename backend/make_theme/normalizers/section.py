def normalize_section(section_id, data):
    # A bare "<id>" meta key reassembles to a plain value; keep it as is
    section_type = data.get("section-type") if isinstance(data, dict) else None
    return {
        "id": section_id,
        "type": section_type,
        "data": data,
    }


def normalize_sections(sections):
    # Insertion order is display order
    return [normalize_section(section_id, data) for section_id, data in sections.items()]
