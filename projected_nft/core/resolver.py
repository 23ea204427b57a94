"""Token URI composition and external resolver capability."""
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class ExternalResolver(Protocol):
    """Anything that can produce a metadata URI for a token id.

    TemplateResolver covers format-string resolvers (the ones AppState builds
    from configuration); CallableResolver wraps a plain function for
    embedding code that resolves URIs some other way.
    """

    def tokenURI(self, token_id: int) -> str:
        ...


def render_id(token_id: int) -> str:
    """Canonical decimal string of an identifier."""
    return str(int(token_id))


def compose_token_uri(token_id: int, base: str, chain_id: int, extension: str) -> str:
    """base + "eip155:<chain>/<id>" + extension.

    An empty base collapses to the bare extension. Kept as-is for
    compatibility with already-published metadata URIs.
    """
    if not base:
        return extension
    return f"{base}eip155:{render_id(chain_id)}/{render_id(token_id)}{extension}"


class TemplateResolver:
    """External resolver built from a format string, e.g. "ipfs://Qm.../{id}".

    Only `{id}` is substituted. Performs no existence check.
    """

    def __init__(self, template: str) -> None:
        self.template = template

    def tokenURI(self, token_id: int) -> str:
        return self.template.replace("{id}", render_id(token_id))


def parse_resolver_templates(text: str) -> dict[str, TemplateResolver]:
    """Parse "name=template;name2=template2" into named resolvers."""
    out = {}
    for part in text.split(";"):
        name, sep, template = part.partition("=")
        name = name.strip()
        if not sep or not name or not template.strip():
            continue
        out[name] = TemplateResolver(template.strip())
    return out


class CallableResolver:
    """Adapt a plain function to the ExternalResolver capability."""

    def __init__(self, fn: Callable[[int], str]) -> None:
        self._fn = fn

    def tokenURI(self, token_id: int) -> str:
        return self._fn(token_id)
