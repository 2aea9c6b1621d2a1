r"""Handle ``{{name: args}}`` directives that set document metadata.

Directives are stripped from the text before block parsing and applied to the
render context and the :class:`~wikidocs.context.Page` being built. They come
in three shapes::

    {{toc}}                  # bare, no argument part
    {{tags: forms, http}}    # colon form
    {{lang(cs:formulare)}}   # call form
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from markdown.preprocessors import Preprocessor

from wikidocs.identifiers import Internal
from wikidocs.resolver import resolve_link

if typ.TYPE_CHECKING:
    from markdown import Markdown

    from wikidocs.context import RenderContext

DIRECTIVE_PATTERN = re.compile(r"\{\{((?:[^'}]|'[^']*'|\}[^}])+)\}\}")
CALL_PATTERN = re.compile(
    r"^([a-z_][a-z0-9_-]*)\s*(?:\(([^()]*)\)|:(.*))$", re.IGNORECASE | re.DOTALL
)
ARG_SEPARATOR = re.compile(r"\s*,\s*")


@dc.dataclass(frozen=True, slots=True)
class Directive:
    """Parsed directive.

    Attributes
    ----------
    name : str
        Directive name (``title``, ``toc``, ...).
    args : list[str]
        Comma-separated arguments, whitespace trimmed.
    raw : str | None
        Trimmed argument text; ``None`` for the bare ``{{name}}`` form.
    """

    name: str
    args: list[str]
    raw: str | None


def parse_directive(body: str) -> Directive | None:
    """Parse the text between ``{{`` and ``}}``; ``None`` when it is blank."""
    text = body.strip()
    if not text:
        return None
    match = CALL_PATTERN.match(text)
    if match is None:
        return Directive(name=text, args=[], raw=None)
    name, call_args, colon_args = match.groups()
    raw = (colon_args if colon_args is not None else call_args).strip()
    args = ARG_SEPARATOR.split(raw) if raw else []
    return Directive(name=name, args=args, raw=raw)


def apply_directive(directive: Directive, ctx: RenderContext) -> None:
    """Apply ``directive`` to the render context and its page metadata."""
    page = ctx.page
    match directive.name:
        case "nofollow":
            ctx.nofollow = not directive.args or directive.args[0] != "no"
        case "title":
            ctx.title = directive.raw
        case "lang":
            if directive.args:
                outcome = resolve_link(directive.args[0], ctx)
                if isinstance(outcome, Internal):
                    page.langs[outcome.page_id.lang] = outcome.page_id.name
        case "tags":
            page.tags.extend(tag.strip() for tag in directive.args if tag.strip())
        case "toc":
            if directive.raw == "no":
                ctx.toc_mode = False
            else:
                ctx.toc_mode = directive.raw
        case "sidebar":
            page.sidebar = directive.raw != "no"
        case "theme":
            if directive.raw == "homepage":
                ctx.heading_top = 2
            page.theme = directive.raw
        case "maintitle":
            page.main_title = directive.raw
        case _:
            ctx.warn(f"Unknown directive: {directive.name}")


class DirectivePreprocessor(Preprocessor):
    """Strip directives from the source, applying each one as it is found."""

    def __init__(self, md: Markdown, ctx: RenderContext) -> None:
        super().__init__(md)
        self.ctx = ctx

    def run(self, lines: list[str]) -> list[str]:
        """Return ``lines`` with every directive applied and removed."""

        def _apply(match: re.Match[str]) -> str:
            directive = parse_directive(match.group(1))
            if directive is None:
                return match.group(0)
            apply_directive(directive, self.ctx)
            return ""

        text = DIRECTIVE_PATTERN.sub(_apply, "\n".join(lines))
        return text.split("\n")


__all__ = ["Directive", "DirectivePreprocessor", "apply_directive", "parse_directive"]
