"""Utilitários para transformar formulários HTML (BeautifulSoup) em descritores de campo."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from bs4 import BeautifulSoup, Tag

from .exceptions import FormNotFoundError
from .models import FieldDescriptor, SelectOption
from .serialize import serialize

log = logging.getLogger(__name__)

# Tags listadas em `form.elements`, na ordem em que aparecem no documento.
ELEMENT_TAGS = ["button", "fieldset", "input", "keygen", "object", "output", "select", "textarea"]

# Valores aceitos em `<input type>`; qualquer outro vira `text`, como no DOM.
INPUT_TYPES = frozenset({
    "button", "checkbox", "color", "date", "datetime-local", "email", "file", "hidden",
    "image", "month", "number", "password", "radio", "range", "reset", "search",
    "submit", "tel", "text", "time", "url", "week",
})


def get_attr_str(tag: Tag, name: str, default: str = "") -> str:
    """Lê um atributo como string (bs4 devolve lista para atributos multivalorados)."""
    value = tag.get(name)
    if value is None:
        return default
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _option_value(opt: Tag) -> str:
    """Valor de uma `option`: atributo `value` ou, na falta dele, o texto."""
    if opt.has_attr("value"):
        return get_attr_str(opt, "value")
    return " ".join(opt.get_text().split())


def _input_descriptor(inp: Tag, name: str) -> FieldDescriptor:
    itype = get_attr_str(inp, "type", "text").strip().lower()
    if itype not in INPUT_TYPES:
        itype = "text"
    if inp.has_attr("value"):
        val = get_attr_str(inp, "value")
    else:
        val = "on" if itype in {"radio", "checkbox"} else ""
    return FieldDescriptor(
        name=name,
        type=itype,
        value=val,
        checked=inp.has_attr("checked"),
        disabled=inp.has_attr("disabled"),
        node_name="input",
    )


def _select_descriptor(sel: Tag, name: str) -> FieldDescriptor:
    multiple = sel.has_attr("multiple")
    options = [
        SelectOption(value=_option_value(opt), selected=opt.has_attr("selected"))
        for opt in sel.find_all("option")
        if isinstance(opt, Tag)
    ]
    selecionadas = [opt for opt in options if opt.selected]
    if selecionadas:
        val = selecionadas[0].value
    elif options and not multiple:
        # select simples sem `selected` assume a primeira opção
        val = options[0].value
    else:
        val = ""
    return FieldDescriptor(
        name=name,
        type="select-multiple" if multiple else "select-one",
        value=val,
        disabled=sel.has_attr("disabled"),
        options=options,
        node_name="select",
    )


def _textarea_descriptor(ta: Tag, name: str) -> FieldDescriptor:
    texto = ta.get_text()
    # o parser HTML descarta a primeira quebra de linha logo após <textarea>
    if texto.startswith("\r\n"):
        texto = texto[2:]
    elif texto.startswith("\n"):
        texto = texto[1:]
    return FieldDescriptor(
        name=name,
        type="textarea",
        value=texto,
        disabled=ta.has_attr("disabled"),
        node_name="textarea",
    )


def _generic_descriptor(tag: Tag, name: str) -> FieldDescriptor:
    if tag.name == "button":
        tipo = get_attr_str(tag, "type", "submit").strip().lower() or "submit"
    else:
        tipo = tag.name
    return FieldDescriptor(
        name=name,
        type=tipo,
        value=get_attr_str(tag, "value"),
        disabled=tag.has_attr("disabled"),
        node_name=tag.name,
    )


def extrair_campos(form: Tag) -> List[FieldDescriptor]:
    """Lista os controles do formulário como `FieldDescriptor`, na ordem do documento."""
    campos: List[FieldDescriptor] = []
    for tag in form.find_all(ELEMENT_TAGS):
        if not isinstance(tag, Tag):
            continue
        name = get_attr_str(tag, "name")
        if tag.name == "input":
            campos.append(_input_descriptor(tag, name))
        elif tag.name == "select":
            campos.append(_select_descriptor(tag, name))
        elif tag.name == "textarea":
            campos.append(_textarea_descriptor(tag, name))
        else:
            campos.append(_generic_descriptor(tag, name))
    log.debug("Formulário com %s controles extraídos", len(campos))
    return campos


def encontrar_formulario(html: str, seletor: Optional[str] = None, indice: int = 0) -> Tag:
    """
    Localiza um `<form>` no HTML por seletor CSS ou pela posição no documento.

    Raises:
        FormNotFoundError: Se nenhum formulário corresponder ao seletor/índice.
    """
    soup = BeautifulSoup(html, "lxml")
    if seletor:
        form = soup.select_one(seletor)
        if not isinstance(form, Tag) or form.name != "form":
            raise FormNotFoundError(f"Formulário não encontrado para o seletor {seletor!r}.")
        return form

    forms = [f for f in soup.find_all("form") if isinstance(f, Tag)]
    if not forms:
        raise FormNotFoundError("Nenhum formulário encontrado no HTML.")
    try:
        return forms[indice]
    except IndexError:
        raise FormNotFoundError(
            f"Formulário de índice {indice} não encontrado ({len(forms)} disponíveis)."
        ) from None


def serializar_formulario(form: Tag, options: Any = None) -> Any:
    """Serializa o formulário completo com as mesmas regras de `serialize`."""
    return serialize(extrair_campos(form), options)
