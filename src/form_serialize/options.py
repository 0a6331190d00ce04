"""Funções utilitárias para interpretar parâmetros de linha de comando e ambiente."""

from __future__ import annotations

import argparse
from typing import List, Optional

from .config import Settings
from .models import SerializeOptions


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Constrói o parser e interpreta os argumentos CLI disponíveis."""
    parser = argparse.ArgumentParser(
        prog="form-serialize",
        description="Serializa um formulário HTML em string url-encoded ou em JSON estruturado.",
    )
    parser.add_argument(
        "arquivo",
        help="Arquivo HTML contendo o formulário ('-' lê da entrada padrão).",
    )

    modo = parser.add_mutually_exclusive_group()
    modo.add_argument(
        "--hash",
        dest="hash",
        action="store_const",
        const=True,
        default=None,
        help="Gera JSON estruturado respeitando a notação de colchetes.",
    )
    modo.add_argument(
        "--flat",
        dest="hash",
        action="store_const",
        const=False,
        help="Gera string application/x-www-form-urlencoded.",
    )

    parser.add_argument(
        "--seletor",
        dest="seletor",
        help="Seletor CSS do formulário (ex: '#frmPesquisa').",
    )
    parser.add_argument(
        "--indice",
        type=int,
        dest="indice",
        default=0,
        help="Posição do formulário no documento quando não há seletor (default: 0).",
    )
    parser.add_argument(
        "--disabled",
        dest="disabled",
        action="store_true",
        default=None,
        help="Inclui campos desabilitados.",
    )
    parser.add_argument(
        "--empty",
        dest="empty",
        action="store_true",
        default=None,
        help="Inclui campos vazios e grupos de radio sem seleção.",
    )
    parser.add_argument(
        "--booleans",
        dest="booleans",
        action="store_true",
        default=None,
        help="Checkboxes viram true/false (null quando indeterminados).",
    )
    parser.add_argument(
        "--saida",
        dest="saida",
        metavar="CAMINHO",
        help="Grava o resultado no arquivo informado em vez de imprimir.",
    )

    return parser.parse_args(argv)


def build_serialize_options(settings: Settings, args: argparse.Namespace) -> SerializeOptions:
    """Monta `SerializeOptions` combinando argumentos CLI e variáveis de ambiente."""
    options = settings.to_options()
    if args.hash is not None:
        options.hash = args.hash
    if args.disabled:
        options.disabled = True
    if args.empty:
        options.empty = True
    if args.booleans:
        options.booleans = True
    return options
