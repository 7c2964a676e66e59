"""Default HTML renderer, registered as ``render``."""

from __future__ import annotations

import json
from typing import Any, ClassVar

from pagewindow.presentation.renderers.base import TemplateRenderer

DEFAULT_LABELS: dict[str, str] = {
    "total": "Total {total}",
    "jump_before": "Go to",
    "jump_after": "page",
}

_ELLIPSIS = "&#8230;"
_PREV_ARROW = "&#8249;"
_NEXT_ARROW = "&#8250;"


class DefaultRenderer(TemplateRenderer):
    """
    Plain ``div.pagination`` markup with prev/next buttons, a numbered page
    window, quick-jump ellipses, a record total and a jump box.

    Options
    -------
    small:
        Adds the ``pagination-small`` class to the wrapper.
    template:
        Order of the parts; any of ``header``, ``total``, ``first``,
        ``prev``, ``main``, ``next``, ``last``, ``jump``, ``footer``.
    labels:
        Overrides for ``DEFAULT_LABELS``.
    """

    name: ClassVar[str] = "render"
    default_options: ClassVar[dict[str, Any]] = {
        "small": False,
        "template": "{header} {total} {first} {prev} {main} {next} {last} {jump} {footer}",
        "labels": {},
    }

    def label(self, key: str) -> str:
        labels = {**DEFAULT_LABELS, **(self.get_option("labels") or {})}
        return labels[key]

    def _render_header(self) -> str:
        small = " pagination-small" if self.get_option("small") else ""
        return f'<div class="pagination{small}">'

    def _render_footer(self) -> str:
        return "</div>"

    def _render_total(self) -> str:
        page = self.paginator
        if not page.can_render_total():
            return ""
        text = self.label("total").replace("{total}", str(page.get_total_records()))
        return f'<span class="pagination-total">{self.escape(text)}</span>'

    def _render_first(self) -> str:
        page = self.paginator
        if not page.can_render_first():
            return ""
        return (
            f'<a href="{self.url(1)}" class="btn-first">1</a>'
            f'<a href="{self.url(page.first_render_prev_target())}" '
            f'class="btn-quickprev">{_ELLIPSIS}</a>'
        )

    def _render_prev(self) -> str:
        page = self.paginator
        if page.can_render_prev():
            return (
                f'<a href="{self.url(page.prev_render_target())}" '
                f'class="btn-prev">{_PREV_ARROW}</a>'
            )
        return f'<span class="btn-prev disabled">{_PREV_ARROW}</span>'

    def _render_main(self) -> str:
        page = self.paginator
        if not page.can_render_main():
            return ""

        current = page.get_current_page()
        links = []
        for number in range(page.get_page_window_start(), page.get_page_window_end() + 1):
            if number == current:
                links.append(f'<span class="number current">{number}</span>')
            else:
                links.append(f'<a href="{self.url(number)}" class="number">{number}</a>')
        return '<span class="pager">' + "".join(links) + "</span>"

    def _render_next(self) -> str:
        page = self.paginator
        if page.can_render_next():
            return (
                f'<a href="{self.url(page.next_render_target())}" '
                f'class="btn-next">{_NEXT_ARROW}</a>'
            )
        return f'<span class="btn-next disabled">{_NEXT_ARROW}</span>'

    def _render_last(self) -> str:
        page = self.paginator
        quick_next = (
            f'<a href="{self.url(page.last_render_next_target())}" '
            f'class="btn-quicknext">{_ELLIPSIS}</a>'
        )

        if page.is_total_macro():
            return quick_next
        if not page.can_render_last():
            return ""

        total = page.get_total_pages()
        last = f'<a href="{self.url(total)}" class="btn-last">{total}</a>'
        return (quick_next if page.can_render_last_next() else "") + last

    def _render_jump(self) -> str:
        # JS string literal first, then attribute escaping.
        target = self.escape(json.dumps(self.paginator.page_replace("{jump}")))
        return (
            '<span class="pagination-jump">'
            f"{self.escape(self.label('jump_before'))}"
            '<input type="number" min="1" class="pagination-editor" '
            f'value="{self.paginator.get_current_page()}" '
            'onkeydown="if (event.keyCode == 13) { '
            f"window.location.href = {target}.replace('{{jump}}', this.value); }}\" "
            'onfocus="this.select();">'
            f"{self.escape(self.label('jump_after'))}"
            "</span>"
        )
