# src/persistent_queue/notebook_ui/renderers.py
"""
Notebook UI Adapter (v1)

Objetivo:
- Exibir filas persistentes em notebooks (material de aula / exploração).
- `render_queue`: ordem lógica da fila, com posição de cada elemento.
- `render_layout`: as duas sequências internas (`leading` / `trailing`),
  útil para visualizar quando o mirror acontece.
- `render_error`: payload canônico de um `QueueException`.

Garantias:
- NÃO altera a fila (filas são imutáveis; nenhuma cópia é necessária).
- NÃO dispara mirror: a leitura é feita por iteração.

Saídas:
- HTML (string)
- fallback textual sempre preenchido
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence
import html
import json

from ..core.config.errors import InvalidSettingError
from ..core.config.settings import QueueSettings
from ..core.exceptions import QueueException
from ..core.queue.api import is_queue
from ..core.queue.interface import QueueReader


@dataclass(frozen=True)
class RenderResult:
    """Resultado de renderização (apenas apresentação)."""
    html: Optional[str]  # HTML string (quando aplicável)
    text: str            # fallback textual (sempre preenchido)


def _escape(s: Any) -> str:
    return html.escape("" if s is None else str(s))


def _as_pretty_json(payload: Any) -> str:
    try:
        return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
    except TypeError:
        return repr(payload)


def _resolve_max_rows(max_rows: Optional[int], settings: Optional[QueueSettings]) -> int:
    if max_rows is not None:
        if isinstance(max_rows, bool) or not isinstance(max_rows, int) or max_rows < 1:
            raise InvalidSettingError(
                key="notebook_ui.max_rows",
                value=max_rows,
                expected="inteiro >= 1",
            )
        return max_rows
    return (settings or QueueSettings()).render_max_rows


def render_queue(
    q: QueueReader[Any],
    *,
    max_rows: Optional[int] = None,
    settings: Optional[QueueSettings] = None,
) -> RenderResult:
    """
    Renderiza a ordem lógica de uma fila (ou visão somente leitura).

    `max_rows` explícito tem prioridade sobre `settings.render_max_rows` e
    segue a mesma validação (`InvalidSettingError` se não for inteiro >= 1).
    """
    limit = _resolve_max_rows(max_rows, settings)
    size = len(q)

    items = []
    for i, item in enumerate(q):
        if i == limit:
            break
        items.append(item)

    title = f"queue ({size} elemento(s))"
    html_out = render_table_html(items, title=title, max_rows=limit)
    if size > limit:
        html_out += f"<div><em>... {size - limit} elemento(s) omitido(s)</em></div>"

    text_out = repr(q)
    return RenderResult(html=html_out, text=text_out)


def render_layout(q: Any) -> RenderResult:
    """
    Renderiza `leading` e `trailing` separadamente.

    Aceita apenas filas criadas por `queue()`; visões somente leitura não
    expõem a representação interna.
    """
    if not is_queue(q):
        raise TypeError(
            f"render_layout requer uma fila criada por queue(), recebido: {type(q).__name__}"
        )

    leading = list(q.leading)
    trailing = list(q.trailing)
    layout = {
        "leading": leading,
        "trailing (ordem armazenada)": trailing,
        "ordem lógica": list(q),
        "mirror pendente": (not leading) and bool(trailing),
    }
    html_out = render_card_html(layout, title="layout interno", subtitle=repr(q))
    return RenderResult(html=html_out, text=_as_pretty_json(layout))


def render_error(exc: QueueException) -> RenderResult:
    """Renderiza o payload canônico de uma exceção da fila."""
    payload = exc.to_payload().to_dict()
    html_out = render_card_html(payload, title=payload["type"], subtitle=payload["message"])
    return RenderResult(html=html_out, text=_as_pretty_json(payload))


def render_kv_table_html(payload: Mapping[str, Any], title: Optional[str] = None) -> str:
    """Renderiza dict como tabela key/value (HTML puro)."""
    rows = []
    for k in payload.keys():
        rows.append(
            f"<tr><td><code>{_escape(k)}</code></td><td>{_escape(payload[k])}</td></tr>"
        )

    heading = f"<h4>{_escape(title)}</h4>" if title else ""
    return (
        f"{heading}"
        "<table>"
        "<thead><tr><th>key</th><th>value</th></tr></thead>"
        "<tbody>"
        + "".join(rows) +
        "</tbody></table>"
    )


def render_table_html(payload: Sequence[Any], title: Optional[str] = None, max_rows: int = 50) -> str:
    """Renderiza uma sequência como tabela `position | value`."""
    items = list(payload)[:max_rows]

    heading = f"<h4>{_escape(title)}</h4>" if title else ""

    if not items:
        return f"{heading}<div><em>(empty)</em></div>"

    trs = "".join(
        f"<tr><td>{i}</td><td>{_escape(repr(x))}</td></tr>" for i, x in enumerate(items)
    )
    return (
        f"{heading}"
        "<table>"
        "<thead><tr><th>position</th><th>value</th></tr></thead>"
        f"<tbody>{trs}</tbody>"
        "</table>"
    )


def render_card_html(payload: Mapping[str, Any], title: str, subtitle: Optional[str] = None) -> str:
    """Renderiza um card simples em HTML (apresentação pura)."""
    st = f"<div style='opacity:0.75'>{_escape(subtitle)}</div>" if subtitle else ""
    body = render_kv_table_html(payload)
    return (
        "<div style='border:1px solid #ddd; border-radius:12px; padding:12px; margin:8px 0;'>"
        f"<h3 style='margin:0 0 6px 0;'>{_escape(title)}</h3>"
        f"{st}"
        f"{body}"
        "</div>"
    )
