"""Message translation.

companykit does not ship a localization pipeline. User-facing strings are
passed through a Translator so the host can plug in its own catalog; without
one, the source string is returned with placeholders substituted.
"""

from typing import Any, Mapping


class Translator:
    """Look up user-facing strings in an optional catalog.

    Placeholders use the ``:name`` form, e.g.
    ``translate("Great! You have joined :company.", company="Acme")``.
    """

    def __init__(self, catalog: Mapping[str, str] | None = None) -> None:
        self.catalog = dict(catalog or {})

    def __call__(self, key: str | None, **replacements: Any) -> str | None:
        if key is None:
            return None

        message = self.catalog.get(key, key)

        # Longest names first so :company_name is not clobbered by :company
        for name in sorted(replacements, key=len, reverse=True):
            message = message.replace(f":{name}", str(replacements[name]))

        return message


default_translator = Translator()
