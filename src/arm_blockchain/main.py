from __future__ import annotations

import json
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from arm_blockchain.config_models import config_to_client_config, load_and_validate_config
from arm_blockchain.core.client import ResourceClient
from arm_blockchain.core.errors import ResourceClientError
from arm_blockchain.utils.logging import get_logger, setup_logging

USAGE = """Usage: arm-blockchain <config.yaml> <operation> [args...]

Operations:
  consortia
  members <member>
  nodes <member>
  keys <member> <node>
  skus
  check-name <name> <type>
  create-consortium <member> <body.json>"""

log = get_logger("arm_blockchain.main")


def _read_body(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _create_consortium(client: ResourceClient, member: str, body_path: str) -> Dict[str, Any]:
    client.create_consortium(member, _read_body(body_path))
    return {"created": member}


def _check_name(client: ResourceClient, name: str, type_: str) -> Dict[str, Any]:
    result = client.check_existence(name, type_)
    return {"nameAvailable": result.name_available, "reason": result.reason, "message": result.message}


OPERATIONS: Dict[str, Tuple[int, Callable[..., Any]]] = {
    "consortia": (0, lambda c: c.get_consortia()),
    "members": (1, lambda c, member: c.get_members(member)),
    "nodes": (1, lambda c, member: c.get_transaction_nodes(member)),
    "keys": (2, lambda c, member, node: c.get_transaction_node_access_keys(member, node)),
    "skus": (0, lambda c: c.get_skus()),
    "check-name": (2, _check_name),
    "create-consortium": (2, _create_consortium),
}


def run(config_path: str, operation: str, args: List[str], client: Optional[ResourceClient] = None) -> Any:
    """
    Run a single operation against the provider.

    Args:
        config_path: Path to the YAML client configuration.
        operation: One of the keys of OPERATIONS.
        args: Positional arguments for the operation.
        client: Pre-built client; built from the configuration when omitted.

    Returns:
        The operation result, ready for JSON output.
    """
    arity, fn = OPERATIONS[operation]
    if len(args) != arity:
        raise ValueError(f"'{operation}' expects {arity} argument(s), got {len(args)}")

    if client is None:
        settings = load_and_validate_config(config_path)
        client = ResourceClient(config_to_client_config(settings))

    log.info("Running %s %s", operation, " ".join(args))
    return fn(client, *args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the blockchain resource client."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 2 or argv[1] not in OPERATIONS:
        print(USAGE)
        raise SystemExit(2)

    setup_logging("configs/logging.yaml")
    config_path, operation, args = argv[0], argv[1], argv[2:]

    try:
        result = run(config_path, operation, args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        print(USAGE)
        raise SystemExit(2)
    except ResourceClientError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    print(json.dumps(result, indent=2, default=str))


if __name__ == "__main__":
    main()
