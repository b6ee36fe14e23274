from .sections import (
    create_array_from_meta_keys,
    order_section_data,
    reassemble_sections,
    get_section_data,
    is_builder_page,
    post_type_supports_builder,
)
from .setup import BuilderSetup, SectionCSSRegistry
