"""Command-line entry point.

Usage:
  cao                          # interactive chat with the default model
  cao -m ollama                # pick a configured model
  cao -p "explain git rebase"  # one-shot prompt
  cao --list-models
  cao --add-model groq https://api.groq.com/openai/v1 llama-3.3-70b [--api-key KEY]
  cao --remove-model groq
  cao --set-default groq
"""

import argparse
import logging
import sys

from cao import config as cfg
from cao._logging import setup_logging
from cao.client import _run_async
from cao.errors import ConfigError
from cao.session import run_interactive, run_single_prompt

log = logging.getLogger(__name__)


def build_parser(default_model: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cao", description="Chat with an AI model from the terminal"
    )
    parser.add_argument(
        "-m", "--model", default=default_model,
        help=f"AI model to use (default: {default_model})",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="enable debug logging")
    parser.add_argument("-p", "--prompt", help="send a single prompt and exit")
    parser.add_argument("--list-models", action="store_true", help="list configured models")
    parser.add_argument(
        "--add-model", nargs=3, metavar=("NAME", "API_BASE", "MODEL"),
        help="add or update a model",
    )
    parser.add_argument("--api-key", help="API key stored with --add-model")
    parser.add_argument("--remove-model", metavar="NAME", help="remove a model")
    parser.add_argument("--set-default", metavar="NAME", help="set the default model")
    return parser


def format_models(models: dict[str, dict], default_model: str) -> str:
    rows = [("NAME", "DEFAULT", "API BASE", "MODEL", "PROVIDER")]
    for name, m in models.items():
        rows.append((
            name,
            "✓" if name == default_model else "",
            m.get("api_base", ""),
            m.get("model", ""),
            m.get("provider") or name,
        ))
    widths = [max(len(r[i]) for r in rows) for i in range(len(rows[0]))]
    return "\n".join(
        "  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows
    )


def _manage(args) -> int | None:
    """Handle the config-management flags. Returns an exit code, or None if none were given."""
    if args.list_models:
        print(format_models(cfg.get_supported_models(), cfg.get_default_model()))
        return 0
    if args.add_model:
        name, api_base, model = args.add_model
        ok = cfg.add_model(name, api_base, model, api_key=args.api_key)
        print(f"Saved model '{name}'" if ok else f"Failed to save model '{name}'")
        return 0 if ok else 1
    if args.remove_model:
        ok = cfg.remove_model(args.remove_model)
        if not ok:
            print(f"Cannot remove '{args.remove_model}' (unknown or default model)")
        return 0 if ok else 1
    if args.set_default:
        ok = cfg.set_default_model(args.set_default)
        if not ok:
            print(f"Unknown model '{args.set_default}'")
        return 0 if ok else 1
    return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser(cfg.get_default_model()).parse_args(argv)
    setup_logging(debug=args.debug)
    log.debug("Debug mode enabled")

    code = _manage(args)
    if code is not None:
        return code

    try:
        model_config = cfg.get_model_config(args.model)
    except ConfigError as e:
        print(e)
        return 1
    log.debug(
        "Selected model: %s (%s @ %s)",
        args.model, model_config.model, model_config.api_base,
    )

    if args.prompt:
        reply = _run_async(run_single_prompt(model_config, args.prompt))
        return 0 if reply.ok else 1

    _run_async(run_interactive(model_config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
