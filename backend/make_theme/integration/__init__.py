from .yoastseo import (
    YoastSEOIntegration,
    BREADCRUMB_VIEWS,
    WOOCOMMERCE_HOOK,
    breadcrumb_setting_id,
    woocommerce_breadcrumb,
)
