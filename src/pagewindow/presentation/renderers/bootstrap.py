"""Bootstrap pagination markup (``nav > ul.pagination > li.page-item``)."""

from __future__ import annotations

from typing import Any, ClassVar

from pagewindow.presentation.renderers.base import TemplateRenderer

_SIZES = ("lg", "sm")


class BootstrapRenderer(TemplateRenderer):
    """Full pager registered as ``bootstrap``; ``size`` may be ``lg`` or ``sm``."""

    name: ClassVar[str] = "bootstrap"
    default_options: ClassVar[dict[str, Any]] = {
        "size": "",
        "template": "{header} {ul} {prev} {first} {main} {last} {next} {endul} {footer}",
    }

    # -- building blocks --------------------------------------------------

    @staticmethod
    def _item(inner: str, *, state: str = "") -> str:
        css = f"page-item {state}".strip()
        return f'<li class="{css}">{inner}</li>'

    def _link(self, page: int | str, text: Any, **attrs: str) -> str:
        extra = "".join(f' {k.replace("_", "-")}="{v}"' for k, v in attrs.items())
        return f'<a class="page-link" href="{self.url(page)}"{extra}>{text}</a>'

    # -- parts ------------------------------------------------------------

    def _render_header(self) -> str:
        return '<nav aria-label="navigation">'

    def _render_footer(self) -> str:
        return "</nav>"

    def _render_ul(self) -> str:
        size = self.get_option("size")
        suffix = f" pagination-{size}" if size in _SIZES else ""
        return f'<ul class="pagination{suffix}">'

    def _render_endul(self) -> str:
        return "</ul>"

    def _render_first(self) -> str:
        page = self.paginator
        if not page.can_render_first():
            return ""
        return self._item(self._link(1, 1)) + self._item(
            self._link(page.first_render_prev_target(), "...")
        )

    def _render_prev(self) -> str:
        page = self.paginator
        arrow = '<span aria-hidden="true">&laquo;</span>'
        if page.can_render_prev():
            return self._item(
                self._link(page.prev_render_target(), arrow, aria_label="Previous")
            )
        return self._item(
            f'<a class="page-link" aria-label="Previous">{arrow}</a>', state="disabled"
        )

    def _render_main(self) -> str:
        page = self.paginator
        if not page.can_render_main():
            return ""

        current = page.get_current_page()
        items = []
        for number in range(page.get_page_window_start(), page.get_page_window_end() + 1):
            if number == current:
                items.append(
                    self._item(f'<a class="page-link">{number}</a>', state="active")
                )
            else:
                items.append(self._item(self._link(number, number)))
        return "".join(items)

    def _render_next(self) -> str:
        page = self.paginator
        arrow = '<span aria-hidden="true">&raquo;</span>'
        if page.can_render_next():
            return self._item(
                self._link(page.next_render_target(), arrow, aria_label="Next")
            )
        return self._item(
            f'<a class="page-link" aria-label="Next">{arrow}</a>', state="disabled"
        )

    def _render_last(self) -> str:
        page = self.paginator
        quick_next = self._item(self._link(page.last_render_next_target(), "..."))

        if page.is_total_macro():
            return quick_next
        if not page.can_render_last():
            return ""

        total = page.get_total_pages()
        last = self._item(self._link(total, total))
        return (quick_next if page.can_render_last_next() else "") + last


class BootstrapSimpleRenderer(BootstrapRenderer):
    """Previous / next only pager, registered as ``bootstrap_simple``."""

    name: ClassVar[str] = "bootstrap_simple"
    default_options: ClassVar[dict[str, Any]] = {
        "size": "",
        "template": "{header} {ul} {prev} {next} {endul} {footer}",
        "labels": {"prev": "Previous", "next": "Next"},
    }

    def _render_ul(self) -> str:
        size = self.get_option("size")
        suffix = f" pagination-{size}" if size in _SIZES else ""
        return f'<ul class="pagination justify-content-between{suffix}">'

    def _render_prev(self) -> str:
        page = self.paginator
        text = self.escape(self.get_option("labels", {}).get("prev", "Previous"))
        if page.can_render_prev():
            return self._item(self._link(page.prev_render_target(), text))
        return self._item(f'<a class="page-link">{text}</a>', state="disabled")

    def _render_next(self) -> str:
        page = self.paginator
        text = self.escape(self.get_option("labels", {}).get("next", "Next"))
        if page.can_render_next():
            return self._item(self._link(page.next_render_target(), text))
        return self._item(f'<a class="page-link">{text}</a>', state="disabled")
