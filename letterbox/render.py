from __future__ import annotations

from dataclasses import dataclass

from jinja2 import Environment, PackageLoader, Template, select_autoescape

from .layout.models import Document

PAGE_TEMPLATE = "page.html"


@dataclass(frozen=True)
class PageRenderer:
    """
    Renders a reconciled Document as an HTML overlay on its source image.

    Build it once at startup (from_package) so a broken template fails
    there instead of on the first request.
    """

    template: Template

    @classmethod
    def from_package(cls, name: str = PAGE_TEMPLATE) -> "PageRenderer":
        env = Environment(
            loader=PackageLoader("letterbox", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        return cls(env.get_template(name))

    @classmethod
    def from_string(cls, source: str) -> "PageRenderer":
        return cls(Environment(autoescape=True).from_string(source))

    def render(self, document: Document, image_url: str) -> str:
        return self.template.render(
            engine_version=document.engine_version,
            image_name=document.image_name,
            image_url=image_url,
            full_text=document.full_text,
            lines=document.lines,
        )
