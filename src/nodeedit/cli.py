from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .backends import FileDocumentStore, get_backend_for_path
from .config import EditorSettings, load_settings
from .coordinator import SyncCoordinator
from .document import parse_document
from .errors import NodeEditError, UnknownNodeError
from .graph import GraphNodeStore
from .jsonpath import parse_path, path_to_string
from .rows import NodeView, normalize_rows, value_to_text

DEBUG_ENV = "NODEEDIT_DEBUG"

logger = logging.getLogger("nodeedit")


def _configure_logging(args: argparse.Namespace, settings: EditorSettings) -> None:
    if args.debug or os.environ.get(DEBUG_ENV):
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
            logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(settings.level)


def _open(args: argparse.Namespace, settings: EditorSettings) -> tuple[FileDocumentStore, GraphNodeStore]:
    store = get_backend_for_path(args.file)
    relaxed = store.relaxed or settings.relaxed_parse or getattr(args, "relaxed", False)
    store.relaxed = relaxed
    document = parse_document(store.get_text(), relaxed=relaxed)
    return store, GraphNodeStore(document)


def _select(args: argparse.Namespace, nodes: GraphNodeStore) -> NodeView:
    if args.id is not None:
        return nodes.select(args.id)
    return nodes.select_path(parse_path(args.path or "$"))


def _parse_assignment(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    return key, value


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def nodes_cmd(args: argparse.Namespace, settings: EditorSettings) -> int:
    _, nodes = _open(args, settings)
    if args.as_json:
        data = [{"id": n.id, "path": path_to_string(n.path)} for n in nodes.nodes]
        print(json.dumps(data))
    else:
        for node in nodes.nodes:
            print(f"{node.id}: {path_to_string(node.path)}")
    return 0


def show_cmd(args: argparse.Namespace, settings: EditorSettings) -> int:
    _, nodes = _open(args, settings)
    node = _select(args, nodes)
    print(path_to_string(node.path))
    print(normalize_rows(node.rows))
    return 0


def edit_cmd(args: argparse.Namespace, settings: EditorSettings) -> int:
    store, nodes = _open(args, settings)
    _select(args, nodes)
    editor = SyncCoordinator(
        nodes, store, atomic=args.atomic or settings.atomic_save
    )
    editor.begin_edit()
    for key, value in args.assignments:
        editor.set_field(key, value)
    result = editor.save()
    if result.noop:
        print("No changes")
        return 0
    for update in result.updates:
        print(f"{update.key} = {value_to_text(update.new_value)}")
    if not result.synced:
        print(result.error, file=sys.stderr)
        return 2
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_target(parser: argparse.ArgumentParser, *, required: bool) -> None:
    group = parser.add_mutually_exclusive_group(required=required)
    group.add_argument("--path", help='Bracket path, e.g. $["customer"][0]')
    group.add_argument("--id", help="Node id as listed by 'nodes'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodeedit", description="Inspect and edit nodes of a JSON document."
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--settings", type=Path, default=None, help="Settings file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_nodes = subparsers.add_parser("nodes", help="List nodes of FILE.")
    p_nodes.add_argument("file", type=Path)
    p_nodes.add_argument("--json", dest="as_json", action="store_true")
    p_nodes.set_defaults(func=nodes_cmd)

    p_show = subparsers.add_parser("show", help="Show one node of FILE.")
    p_show.add_argument("file", type=Path)
    _add_target(p_show, required=False)
    p_show.set_defaults(func=show_cmd)

    p_edit = subparsers.add_parser("edit", help="Edit scalar fields of one node.")
    p_edit.add_argument("file", type=Path)
    _add_target(p_edit, required=True)
    p_edit.add_argument("assignments", nargs="+", type=_parse_assignment, metavar="KEY=VALUE")
    p_edit.add_argument("--atomic", action="store_true", help="Commit nothing if the document cannot be patched")
    p_edit.add_argument("--relaxed", action="store_true", help="Parse FILE as JSON5")
    p_edit.set_defaults(func=edit_cmd)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 1
    try:
        settings = load_settings(args.settings)
        _configure_logging(args, settings)
        return int(func(args, settings))
    except UnknownNodeError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (NodeEditError, OSError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
