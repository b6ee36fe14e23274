# make_theme/compatibility/keyconverter.py

# Theme mod keys renamed in 1.5.0: legacy -> current
CONVERTED_KEYS = {
    "font-site": "font-family-body",
    "font-header": "font-family-h1",
    "font-nav": "font-family-nav",
    "font-site-size": "font-size-body",
    "font-header-size": "font-size-h1",
    "font-nav-size": "font-size-nav",
    "main-content-link-underline": "link-underline-body",
}


class KeyConverter:
    """
    Carries values stored under legacy theme mod keys over to the current
    keys. A value already stored under the current key wins.
    """

    name = "compatibility.keyconverter"

    def __init__(self, context, compatibility, keys=None):
        self.context = context
        self.compatibility = compatibility
        self.keys = dict(CONVERTED_KEYS if keys is None else keys)

    def hook(self):
        if self.context.is_hooked(self.name):
            return

        self.context.hooks.add_filter("make_settings_thememod_stored_values", self.convert_values)
        self.context.mark_hooked(self.name)

    def convert_values(self, values):
        converted = dict(values)
        for old, new in self.keys.items():
            if old in converted and new not in converted:
                converted[new] = converted[old]
        return converted
