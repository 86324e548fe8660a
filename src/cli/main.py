"""basegraph CLI entry points.

This module exposes commands to serialize documents and inspect records.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import BaseGraphConfig
from core.errors import BaseGraphError
from ingest.document_reader import read_source_document
from store.graph_sdk import BaseGraphClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="basegraph", description="Content-addressed object graphs")
    parser.add_argument("--data-root", help="Override BASEGRAPH_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_serialize_command(subparsers)
    _add_show_command(subparsers)
    _add_load_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the basegraph CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.data_root)
        if args.command == "serialize":
            return _run_serialize_command(client, args)
        if args.command == "show":
            return _run_show_command(client, args)
        if args.command == "load":
            return _run_load_command(client, args)
    except BaseGraphError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_root: str | None) -> BaseGraphClient:
    """Build SDK client with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = BaseGraphConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return BaseGraphClient(config)


def _run_serialize_command(client: BaseGraphClient, args: argparse.Namespace) -> int:
    """Handle serialize command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    document = read_source_document(args.source)
    result = client.serialize(document)
    print(f"object_id={result.object_id}")
    print(f"records_written={result.records_written}")
    return 0


def _run_show_command(client: BaseGraphClient, args: argparse.Namespace) -> int:
    """Handle show command."""
    json_text = client.get_record_json(args.object_id)
    if json_text is None:
        print(f"error=Object {args.object_id} not found")
        return 1
    print(json_text)
    return 0


def _run_load_command(client: BaseGraphClient, args: argparse.Namespace) -> int:
    """Handle load command."""
    graph = client.load(args.object_id)
    print(json.dumps(graph, indent=2, ensure_ascii=False))
    return 0


def _add_serialize_command(subparsers: Any) -> None:
    """Register serialize subcommand."""
    parser = subparsers.add_parser("serialize", help="Serialize a JSON or YAML document")
    parser.add_argument("source", help="Source .json, .yaml, or .yml file")


def _add_show_command(subparsers: Any) -> None:
    """Register show subcommand."""
    parser = subparsers.add_parser("show", help="Print one stored record")
    parser.add_argument("object_id", help="Record id")


def _add_load_command(subparsers: Any) -> None:
    """Register load subcommand."""
    parser = subparsers.add_parser("load", help="Print a reassembled graph")
    parser.add_argument("object_id", help="Root record id")
