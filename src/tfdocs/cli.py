# src/tfdocs/cli.py
"""
Interface de linha de comando do tfdocs.

Este módulo é o adapter de binding de flags: declara os conjuntos atual e
legado de flags, registra quais flags o usuário informou explicitamente e
entrega a `Config` populada junto com o `ChangedFlags` ao resolver. Os
settings e options resolvidos são impressos em YAML.

Limites explícitos:
    - Mensagens e help da CLI ficam em inglês (mesma língua das flags)
    - Nenhuma regra de reconciliação vive aqui
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Tuple

import yaml

from .core.config import (
    ChangedFlags,
    Config,
    ConfigError,
    Resolution,
    ResolutionContext,
    config_from_mapping,
    resolve,
)
from .core.config.normalize import PROGRAM_PREFIX
from .logging_utils import configure_logging, forward_events, forward_warnings

PROG = "tfdocs"

# flag name -> path inside Config.to_dict()
FLAG_BINDINGS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("header-from", ("header_from",)),
    ("show", ("sections", "show")),
    ("hide", ("sections", "hide")),
    ("show-all", ("sections", "show_all")),
    ("hide-all", ("sections", "hide_all")),
    ("no-header", ("sections", "deprecated", "no_header")),
    ("no-inputs", ("sections", "deprecated", "no_inputs")),
    ("no-outputs", ("sections", "deprecated", "no_outputs")),
    ("no-providers", ("sections", "deprecated", "no_providers")),
    ("no-requirements", ("sections", "deprecated", "no_requirements")),
    ("output-values", ("output_values", "enabled")),
    ("output-values-from", ("output_values", "from")),
    ("sort", ("sort", "enabled")),
    ("sort-by-required", ("sort", "by", "required")),
    ("sort-by-type", ("sort", "by", "type")),
    ("no-sort", ("sort", "deprecated", "no_sort")),
    ("color", ("settings", "color")),
    ("escape", ("settings", "escape")),
    ("indent", ("settings", "indent")),
    ("required", ("settings", "required")),
    ("sensitive", ("settings", "sensitive")),
    ("no-color", ("settings", "deprecated", "no_color")),
    ("no-escape", ("settings", "deprecated", "no_escape")),
    ("no-required", ("settings", "deprecated", "no_required")),
    ("no-sensitive", ("settings", "deprecated", "no_sensitive")),
)

# flags booleanas: nunca consomem o argumento seguinte
TOGGLE_FLAGS: FrozenSet[str] = frozenset(
    {
        "show-all",
        "hide-all",
        "no-header",
        "no-inputs",
        "no-outputs",
        "no-providers",
        "no-requirements",
        "output-values",
        "sort",
        "sort-by-required",
        "sort-by-type",
        "no-sort",
        "color",
        "escape",
        "required",
        "sensitive",
        "no-color",
        "no-escape",
        "no-required",
        "no-sensitive",
    }
)

_TRUE = {"1", "t", "true", "yes", "on"}
_FALSE = {"0", "f", "false", "no", "off"}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: '{value}'")


def _dest(flag: str) -> str:
    return flag.replace("-", "_")


def _add_toggle(parser: Any, flag: str, help_text: str) -> None:
    parser.add_argument(
        f"--{flag}",
        dest=_dest(flag),
        action="store_const",
        const=True,
        help=help_text,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Resolve documentation flags for a Terraform module into the "
            "settings used by the renderer and the module parser."
        ),
        epilog="Boolean flags take a value only as '--flag=BOOL' (e.g. '--sort=false').",
        argument_default=argparse.SUPPRESS,
        allow_abbrev=False,
    )

    parser.add_argument(
        "formatter",
        nargs="+",
        help="Formatter to generate documentation with (e.g. 'markdown table').",
    )

    parser.add_argument(
        "--header-from",
        dest="header_from",
        metavar="PATH",
        help="Relative path of a file to read header from (default: main.tf).",
    )

    sections = parser.add_argument_group("sections")
    sections.add_argument(
        "--show",
        dest="show",
        action="append",
        metavar="SECTION",
        help="Show section (header, inputs, outputs, providers, requirements).",
    )
    sections.add_argument(
        "--hide",
        dest="hide",
        action="append",
        metavar="SECTION",
        help="Hide section (header, inputs, outputs, providers, requirements).",
    )
    _add_toggle(sections, "show-all", "Show all sections (default: true).")
    _add_toggle(sections, "hide-all", "Hide all sections (default: false).")
    for section in ("header", "inputs", "outputs", "providers", "requirements"):
        _add_toggle(
            sections,
            f"no-{section}",
            f"Do not show {section} (deprecated, use '--hide {section}').",
        )

    outputs = parser.add_argument_group("output values")
    _add_toggle(outputs, "output-values", "Inject output values into outputs.")
    outputs.add_argument(
        "--output-values-from",
        dest="output_values_from",
        metavar="PATH",
        help="Inject output values from file into outputs.",
    )

    sorting = parser.add_argument_group("sorting")
    _add_toggle(sorting, "sort", "Sort items (default: true).")
    _add_toggle(sorting, "sort-by-required", "Sort items by name and print required ones first.")
    _add_toggle(sorting, "sort-by-type", "Sort items by type of them.")
    _add_toggle(sorting, "no-sort", "Do not sort items (deprecated, use '--sort=false').")

    settings = parser.add_argument_group("settings")
    _add_toggle(settings, "color", "Colorize printed output (default: true).")
    _add_toggle(settings, "escape", "Escape special characters (default: true).")
    settings.add_argument(
        "--indent",
        dest="indent",
        type=int,
        metavar="N",
        help="Indention level of Markdown sections [1, 2, 3, 4, 5] (default: 2).",
    )
    _add_toggle(settings, "required", "Show 'Required' column or section (default: true).")
    _add_toggle(settings, "sensitive", "Show 'Sensitive' column or section (default: true).")
    for name in ("color", "escape", "required", "sensitive"):
        _add_toggle(
            settings,
            f"no-{name}",
            f"Do not {name} (deprecated, use '--{name}=false').",
        )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    return parser


def _split_toggle_values(argv: Sequence[str]) -> Tuple[List[str], Dict[str, bool]]:
    """
    Separa o valor explícito das flags booleanas (`--flag=valor`).

    O argparse recebe apenas `--flag`; o valor de cada flag (a última
    ocorrência vence, `--flag` sozinha vale true) é devolvido à parte.
    Tudo o que vem depois de `--` é repassado sem alteração.
    """
    tokens: List[str] = []
    values: Dict[str, bool] = {}
    remaining = iter(argv)
    for arg in remaining:
        if arg == "--":
            tokens.append(arg)
            tokens.extend(remaining)
            break
        option, sep, raw = arg.partition("=")
        if option.startswith("--") and option[2:] in TOGGLE_FLAGS:
            values[_dest(option[2:])] = _parse_bool(raw) if sep else True
            tokens.append(option)
        else:
            tokens.append(arg)
    return tokens, values


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_arg_parser()
    raw = sys.argv[1:] if argv is None else argv
    try:
        tokens, values = _split_toggle_values(raw)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    args = parser.parse_args(tokens)
    for dest, value in values.items():
        setattr(args, dest, value)
    return args


def _split_sections(values: Sequence[str]) -> List[str]:
    names: List[str] = []
    for value in values:
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return names


def bind_flags(args: argparse.Namespace) -> Tuple[Config, ChangedFlags]:
    """
    Constrói a `Config` bruta e o conjunto de flags informadas.

    Toda flag é declarada com default suprimido, então uma flag só aparece
    no namespace quando o usuário a informou.
    """
    supplied = vars(args)
    overrides: Dict[str, Any] = {}
    changed: List[str] = []

    for flag, path in FLAG_BINDINGS:
        dest = _dest(flag)
        if dest not in supplied:
            continue
        value = supplied[dest]
        if flag in ("show", "hide"):
            value = _split_sections(value)

        node = overrides
        for key in path[:-1]:
            node = node.setdefault(key, {})
        node[path[-1]] = value
        changed.append(flag)

    return config_from_mapping(overrides), ChangedFlags.of(*changed)


def render_resolution(resolution: Resolution) -> str:
    document = {
        "formatter": resolution.config.formatter,
        "settings": resolution.settings.to_dict(),
        "options": resolution.options.to_dict(),
    }
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    configure_logging(verbosity=args.verbose)

    command = f"{PROGRAM_PREFIX}{' '.join(args.formatter)}"

    try:
        config, changed = bind_flags(args)
    except ConfigError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1

    ctx = ResolutionContext(changed=changed)
    try:
        resolution = resolve(config, ctx, command=command)
    except ConfigError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1
    finally:
        forward_events(ctx.events)
        forward_warnings(ctx.warnings)

    sys.stdout.write(render_resolution(resolution))
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
