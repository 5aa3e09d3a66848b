"""
CLI entrypoint for the deepseek_catalog library.

Examples:
    deepseek-catalog list-models
    deepseek-catalog show-provider --indent 2
    deepseek-catalog show-model deepseek/deepseek-reasoner
    deepseek-catalog cost deepseek-chat --prompt-tokens 1200 --completion-tokens 300
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List

from .exceptions import DeepSeekCatalogError, InvalidModelRefError
from .models import ALL_MODELS, DEEPSEEK_PROVIDER, get_model
from .pricing import calculate_cost
from .provider import build_model_definition, build_provider, parse_model_ref

logger = logging.getLogger(__name__)


def _resolve_model_id(value: str) -> str:
    """Accept either a bare id or a ``deepseek/<id>`` reference."""
    if "/" not in value:
        return value.strip()
    ref = parse_model_ref(value)
    if ref.provider != DEEPSEEK_PROVIDER:
        raise InvalidModelRefError(
            value, f"provider '{ref.provider}' is not '{DEEPSEEK_PROVIDER}'"
        )
    return ref.model


def _dump(payload: Any, indent: int | None) -> None:
    print(json.dumps(payload, indent=indent, ensure_ascii=False))


def list_models() -> None:
    for model in ALL_MODELS:
        marker = " [reasoning]" if model.reasoning else ""
        print(
            f"- {model.id}: {model.name} "
            f"(context {model.context_window}, max output {model.max_tokens}){marker}"
        )


def show_provider(args: argparse.Namespace) -> None:
    _dump(build_provider().to_dict(), args.indent)


def show_model(args: argparse.Namespace) -> None:
    entry = get_model(_resolve_model_id(args.model))
    _dump(build_model_definition(entry).to_dict(), args.indent)


def show_cost(args: argparse.Namespace) -> None:
    model_id = _resolve_model_id(args.model)
    get_model(model_id)
    cost = calculate_cost(
        model_id,
        prompt_tokens=args.prompt_tokens,
        completion_tokens=args.completion_tokens,
        cache_read_tokens=args.cache_read_tokens,
        cache_write_tokens=args.cache_write_tokens,
    )
    print(f"{model_id}: ${cost:.6f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DeepSeek model catalog CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list-models", help="List catalog models")
    list_parser.set_defaults(func="list")

    provider_parser = subparsers.add_parser(
        "show-provider", help="Print the provider descriptor as JSON"
    )
    provider_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    provider_parser.set_defaults(func="provider")

    model_parser = subparsers.add_parser("show-model", help="Print one model definition as JSON")
    model_parser.add_argument("model", help="Model id or deepseek/<id> reference")
    model_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    model_parser.set_defaults(func="model")

    cost_parser = subparsers.add_parser("cost", help="Estimate request cost in USD")
    cost_parser.add_argument("model", help="Model id or deepseek/<id> reference")
    cost_parser.add_argument("--prompt-tokens", type=int, required=True, help="Prompt tokens")
    cost_parser.add_argument(
        "--completion-tokens", type=int, required=True, help="Completion tokens"
    )
    cost_parser.add_argument(
        "--cache-read-tokens", type=int, default=0, help="Prompt tokens read from cache"
    )
    cost_parser.add_argument(
        "--cache-write-tokens", type=int, default=0, help="Prompt tokens written to cache"
    )
    cost_parser.set_defaults(func="cost")

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    logger.debug("Running command %s", args.command)

    try:
        if args.func == "list":
            list_models()
        elif args.func == "provider":
            show_provider(args)
        elif args.func == "model":
            show_model(args)
        elif args.func == "cost":
            show_cost(args)
        else:
            parser.print_help()
    except (DeepSeekCatalogError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
