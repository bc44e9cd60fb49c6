from __future__ import annotations

from contextlib import contextmanager
from html import escape
from typing import Callable, Iterator, Optional, Sequence

import altair as alt
import streamlit as st

from pubquality.aggregate import QualityView, counts_frame, format_average, quality_color
from pubquality.constants import (
    DARK_TEXT_COLOR,
    LIGHT_TEXT_COLOR,
    LIGHT_TEXT_LABELS,
    MAX_SCORE,
)
from pubquality.storage import Record

CHART_HEIGHT = 400


def _inject_css() -> None:
    st.markdown(
        """
<style>
:root {
  --pq-app-bg: #F9FAFB;
  --pq-card-bg: #FFFFFF;
  --pq-text-primary: #111827;
  --pq-text-secondary: #6B7280;
  --pq-text-muted: #9CA3AF;
  --pq-border: #E5E7EB;
  --pq-accent: #2563EB;
  --pq-link: #2563EB;
  --pq-link-hover: #1E40AF;
}

.stApp {
  background: var(--pq-app-bg);
  color: var(--pq-text-primary);
}

.main .block-container {
  max-width: 80rem;
  padding-top: 2rem;
  padding-bottom: 2rem;
}

.pq-page-title {
  margin: 0 0 1.5rem 0;
  font-size: 1.9rem;
  line-height: 1.2;
  font-weight: 700;
  color: var(--pq-text-primary);
}

.pq-card-title {
  margin: 0 0 0.8rem 0;
  font-size: 1.2rem;
  font-weight: 600;
  color: var(--pq-text-primary);
}

.pq-card-help {
  margin-top: -0.5rem;
  margin-bottom: 0.7rem;
  font-size: 0.85rem;
  color: var(--pq-text-secondary);
}

[data-testid="stVerticalBlockBorderWrapper"] {
  border: 1px solid #E5E7EB !important;
  border-radius: 8px !important;
  background: var(--pq-card-bg) !important;
  box-shadow: 0 10px 15px -3px rgba(0, 0, 0, 0.08) !important;
}

.pq-score {
  display: flex;
  flex-direction: column;
  align-items: center;
  justify-content: center;
  height: 400px;
  text-align: center;
}

.pq-score-value {
  font-size: 3.75rem;
  font-weight: 700;
  color: var(--pq-accent);
  line-height: 1;
}

.pq-score-scale {
  margin-top: 1rem;
  color: var(--pq-text-secondary);
}

.pq-score-caption {
  margin-top: 0.5rem;
  font-size: 0.85rem;
  color: var(--pq-text-muted);
}

.pq-section {
  display: flex;
  align-items: center;
  width: 100%;
  padding: 0.8rem 1rem;
  border-radius: 8px;
  font-weight: 500;
}

.pq-section-count {
  margin-left: 0.5rem;
  opacity: 0.8;
  font-weight: 400;
}

.pq-link {
  padding: 0.35rem 0 0.35rem 1rem;
  word-break: break-all;
}

.pq-link a {
  color: var(--pq-link);
  text-decoration: none;
}

.pq-link a:hover {
  color: var(--pq-link-hover);
}

.pq-link-icon {
  margin-right: 0.5rem;
  color: var(--pq-text-muted);
}
</style>
        """,
        unsafe_allow_html=True,
    )


def init_page() -> None:
    _inject_css()


def render_page_header(title: str, subtitle: Optional[str] = None) -> None:
    st.markdown(f'<h1 class="pq-page-title">{escape(title)}</h1>', unsafe_allow_html=True)
    if subtitle:
        st.caption(subtitle)


@contextmanager
def card(title: str, help_text: Optional[str] = None) -> Iterator[None]:
    with st.container(border=True):
        st.markdown(f'<div class="pq-card-title">{escape(title)}</div>', unsafe_allow_html=True)
        if help_text:
            st.markdown(f'<div class="pq-card-help">{escape(help_text)}</div>', unsafe_allow_html=True)
        yield


def quality_text_color(quality: str) -> str:
    return LIGHT_TEXT_COLOR if quality in LIGHT_TEXT_LABELS else DARK_TEXT_COLOR


def quality_pie_chart(view: QualityView) -> alt.Chart:
    """Pie of records per label; slices and legend keep first-seen label order."""
    df = counts_frame(view)
    labels = df["quality"].tolist()
    return (
        alt.Chart(df)
        .mark_arc()
        .encode(
            theta=alt.Theta("count:Q", stack=True),
            color=alt.Color(
                "quality:N",
                sort=labels,
                scale=alt.Scale(domain=labels, range=df["color"].tolist()),
                legend=alt.Legend(title=None, orient="top"),
            ),
            order=alt.Order("order:Q"),
            tooltip=[alt.Tooltip("quality:N", title="Calidad"), alt.Tooltip("count:Q", title="Publicaciones")],
        )
        .properties(height=CHART_HEIGHT)
    )


def render_distribution(view: QualityView) -> None:
    if view.is_empty:
        st.caption("No hay publicaciones para graficar.")
        return
    st.altair_chart(quality_pie_chart(view), use_container_width=True)


def render_average(view: QualityView) -> None:
    value = escape(format_average(view))
    st.markdown(
        '<div class="pq-score">'
        f'<div class="pq-score-value">{value}</div>'
        f'<div class="pq-score-scale">de {MAX_SCORE} puntos</div>'
        f'<div class="pq-score-caption">Basado en {view.total} publicaciones</div>'
        "</div>",
        unsafe_allow_html=True,
    )


def _section_header_html(quality: str, count: int) -> str:
    bg = quality_color(quality)
    fg = quality_text_color(quality)
    return (
        f'<div class="pq-section" style="background:{bg}; color:{fg};">'
        f"<span>{escape(quality)}</span>"
        f'<span class="pq-section-count">({count} publicaciones)</span>'
        "</div>"
    )


def render_links(records: Sequence[Record]) -> None:
    if not records:
        st.caption("Sin publicaciones en esta categoría.")
        return
    parts = []
    for rec in records:
        href = escape(rec.link, quote=True)
        parts.append(
            '<div class="pq-link"><span class="pq-link-icon">&#8599;</span>'
            f'<a href="{href}" target="_blank" rel="noopener noreferrer">{escape(rec.link)}</a></div>'
        )
    st.markdown("".join(parts), unsafe_allow_html=True)


def quality_section(
    quality: str,
    records: Sequence[Record],
    expanded: bool,
    on_toggle: Callable[[str], None],
) -> None:
    head, toggle = st.columns([12, 1], vertical_alignment="center")
    with head:
        st.markdown(_section_header_html(quality, len(records)), unsafe_allow_html=True)
    with toggle:
        st.button(
            ":material/expand_less:" if expanded else ":material/expand_more:",
            key=f"toggle_{quality}",
            help="Ocultar publicaciones" if expanded else "Ver publicaciones",
            on_click=on_toggle,
            args=(quality,),
        )
    if expanded:
        render_links(records)
