# app.py
from __future__ import annotations

import os
import sys
from typing import List, Optional

from config import parse_args
from errors import FatalError, UsageError
from k8s import list_ingresses, new_api_client, resolve_credentials
from render import execute, load_template


def _debug(msg: str) -> None:
    print(f"[kube-template] {msg}", file=sys.stderr)


def run(argv: Optional[List[str]] = None) -> None:
    settings = parse_args(argv)

    creds = resolve_credentials(settings.kubeconfig)
    if settings.debug:
        _debug(f"using {creds.source} config")

    api = new_api_client(creds)
    # one snapshot, taken before any rendering starts
    ingresses = list_ingresses(api, settings.namespace)
    if settings.debug:
        _debug(f"listed {len(ingresses)} ingresses (namespace={settings.namespace or '*'})")

    template = load_template(settings.template)
    execute(template, ingresses, sys.stdout)
    sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    try:
        run(argv)
    except UsageError as e:
        print(e.cause, file=sys.stderr)
        return 1
    except FatalError as e:
        print(f"[kube-template] {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # stdout closed early (piped into `head`); stop quietly
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
