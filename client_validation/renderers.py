"""Renderers for the published client validation rules."""

from rest_framework.renderers import BaseRenderer, JSONRenderer

from .conf import get_namespace

# Keeps the payload inert when the script is inlined in a <script> element.
SCRIPT_ESCAPES = {
    ord("<"): "\\u003C",
    ord(">"): "\\u003E",
    ord("&"): "\\u0026",
}


class ClientValidationScriptRenderer(BaseRenderer):
    """
    Wraps the JSON payload in an IIFE assigning it to
    ``<namespace>.clientValidationRules``.

    Error responses are rendered as plain JSON so an error envelope is never
    assigned to the namespace.
    """

    media_type = "text/javascript"
    format = "js"
    charset = "utf-8"

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = (renderer_context or {}).get("response")
        if response is not None and response.exception:
            response["Content-Type"] = JSONRenderer.media_type
            return JSONRenderer().render(data)

        payload = JSONRenderer().render(data).decode("utf-8").translate(SCRIPT_ESCAPES)
        lines = [
            "(function () {",
            f"\t{get_namespace()}.clientValidationRules = {payload};",
            "})();",
            "",
        ]
        return "\n".join(lines).encode(self.charset)
