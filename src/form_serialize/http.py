"""Funções auxiliares para enviar formulários serializados via HTTP."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
from bs4 import Tag

from .config import resolve_options
from .dom import extrair_campos, get_attr_str
from .exceptions import FormSubmitError
from .serialize import serialize

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

log = logging.getLogger(__name__)


@dataclass
class FormRequest:
    """Requisição pronta para envio: método, URL de destino e corpo url-encoded."""

    method: str
    url: str
    body: str

    @property
    def headers(self) -> Dict[str, str]:
        if self.method == "post":
            return {"Content-Type": FORM_CONTENT_TYPE}
        return {}


def create_session() -> requests.Session:
    """Inicializa uma sessão HTTP com cabeçalhos de navegador."""
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    return session


def _with_query(url: str, query: str) -> str:
    """Substitui a query string da URL, como o navegador faz em envios GET."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def montar_requisicao(form: Tag, base_url: str, options: Any = None) -> FormRequest:
    """Resolve `action`/`method` do formulário e serializa seus campos no formato plano."""
    resolved = replace(resolve_options(options), hash=False)
    body = serialize(extrair_campos(form), resolved)

    action = get_attr_str(form, "action").strip()
    url_action = urljoin(base_url, action) if action else base_url
    method = get_attr_str(form, "method", "get").strip().lower()
    if method != "post":
        return FormRequest(method="get", url=_with_query(url_action, body), body="")
    return FormRequest(method="post", url=url_action, body=body)


def enviar_formulario(
    session: requests.Session,
    form: Tag,
    base_url: str,
    options: Any = None,
    timeout: int = 60,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """
    Envia o formulário como o navegador faria e devolve a resposta.

    Raises:
        FormSubmitError: Em falhas de rede ou respostas HTTP de erro.
    """
    requisicao = montar_requisicao(form, base_url, options)
    request_headers = dict(DEFAULT_HEADERS)
    request_headers.setdefault("Referer", base_url)
    request_headers.update(requisicao.headers)
    if headers:
        request_headers.update(headers)

    log.info("Enviando formulário (%s) para %s", requisicao.method.upper(), requisicao.url)
    try:
        if requisicao.method == "post":
            response = session.post(requisicao.url, data=requisicao.body, headers=request_headers, timeout=timeout)
        else:
            response = session.get(requisicao.url, headers=request_headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FormSubmitError(f"Erro ao enviar formulário para {requisicao.url}: {exc}") from exc
    return response
