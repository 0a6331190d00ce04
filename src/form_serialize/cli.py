"""Ponto de entrada de linha de comando para serializar formulários de arquivos HTML."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import configure_logging, load_settings
from .dom import encontrar_formulario, serializar_formulario
from .exceptions import FormSerializeError
from .options import build_serialize_options, parse_cli_args
from .storage import dumps_resultado, salvar_resultado

log = logging.getLogger(__name__)


def _ler_html(arquivo: str) -> str:
    if arquivo == "-":
        return sys.stdin.read()
    return Path(arquivo).expanduser().read_text(encoding="utf-8")


def run(argv: Optional[list[str]] = None) -> int:
    """Executa o fluxo da CLI: ler HTML, localizar o formulário, serializar e emitir."""
    args = parse_cli_args(argv)

    try:
        settings = load_settings()
        configure_logging(settings)
        options = build_serialize_options(settings, args)

        html = _ler_html(args.arquivo)
        form = encontrar_formulario(html, seletor=args.seletor, indice=args.indice)
        resultado = serializar_formulario(form, options)

        if args.saida:
            salvar_resultado(resultado, args.saida)
        else:
            print(dumps_resultado(resultado))
        return 0

    except FormSerializeError as exc:
        log.error("%s", exc)
        return 2
    except OSError as exc:
        log.error("Erro ao acessar arquivo: %s", exc)
        return 3


def main(argv: Optional[list[str]] = None) -> None:
    """Wrapper que encerra o programa com o código de retorno da execução."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
