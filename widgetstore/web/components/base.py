"""
Component base for the widget store's server-rendered HTML.

A component keeps the data it needs and turns it into an HTML string in
`render()`. Untrusted values reach the markup only through `escape` or
`attributes`, so a page is safe as long as its components use them.
"""

from typing import Any, Dict, Optional
import html


def _attribute_name(key: str) -> str:
    # class_ -> class, for_ -> for, hx_get -> hx-get, data_widget_id -> data-widget-id
    if key.endswith("_"):
        return key[:-1]
    return key.replace("_", "-")


class Component:
    """Base class of all widget store components."""

    def render(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement render()")

    @staticmethod
    def escape(value: Optional[Any]) -> str:
        """HTML-escape `value`, quotes included; None renders as an empty string."""
        if value is None:
            return ""
        return html.escape(str(value), quote=True)

    @staticmethod
    def classes(*names: str, **flags: bool) -> str:
        """Join CSS class names; keyword names are added when their flag is true.

        >>> Component.classes("star", filled=True, dim=False)
        'star filled'
        """
        active = [name for name in names if name]
        active.extend(name for name, on in flags.items() if on)
        return " ".join(active)

    @staticmethod
    def aria(**states: Any) -> Dict[str, Optional[str]]:
        """ARIA states as keyword arguments for `attributes()`.

        Booleans become "true"/"false" (ARIA never uses bare attributes);
        None values are dropped by `attributes()`.

        >>> Component.attributes(**Component.aria(invalid=True, describedby=None))
        'aria-invalid="true"'
        """
        result: Dict[str, Optional[str]] = {}
        for name, value in states.items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            result[f"aria_{name}"] = None if value is None else str(value)
        return result

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Render keyword arguments as HTML attributes.

        True renders the bare attribute name, False and None leave the
        attribute out, anything else is escaped into a quoted value.
        """
        parts = []
        for key, value in attrs.items():
            if value is None or value is False:
                continue
            name = _attribute_name(key)
            if value is True:
                parts.append(name)
            else:
                parts.append(f'{name}="{html.escape(str(value), quote=True)}"')
        return " ".join(parts)
