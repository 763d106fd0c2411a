# config.py
from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from errors import UsageError

DEFAULT_KUBECONFIG = os.path.join(os.path.expanduser("~"), ".kube", "config")


@dataclass(frozen=True)
class Settings:
    template: str
    kubeconfig: str = DEFAULT_KUBECONFIG
    namespace: str = ""
    debug: bool = False


def debug_enabled() -> bool:
    return os.environ.get("KUBE_TEMPLATE_DEBUG", "0") == "1"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "kube-template",
        description="Render Kubernetes ingresses through a Jinja2 template.",
        usage="%(prog)s [flags] <template.txt>",
    )
    parser.add_argument("template", nargs="?", help="Template file to render")
    # single-dash long flags are kept for compatibility with existing invocations
    parser.add_argument(
        "-kubeconfig",
        "--kubeconfig",
        dest="kubeconfig",
        default=DEFAULT_KUBECONFIG,
        help="Path to kubeconfig file (default: %(default)s)",
    )
    parser.add_argument(
        "-n",
        "--namespace",
        dest="namespace",
        default="",
        help="Namespace to read data from (default: all namespaces)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Settings:
    """Turn command line arguments into Settings.

    Raises UsageError (carrying the full help text) when no template is given.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.template:
        raise UsageError(parser.format_help().rstrip())

    return Settings(
        template=args.template,
        kubeconfig=args.kubeconfig,
        namespace=args.namespace,
        debug=debug_enabled(),
    )
