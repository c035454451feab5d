"""Example of resolving a secret with a HOCON static configuration.

Start a dev server and seed a secret first::

    vault server -dev -dev-root-token-id=root
    vault kv put secret/app password=hunter2
"""

import logging
import sys
from pathlib import Path

from vault_resolver import ReferenceResolver, VaultError


def main() -> int:
    """Resolve ``secret/app`` and print the password field."""
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    config_path = Path(__file__).parent / "vault.conf"
    resolver = ReferenceResolver.from_file(config_path)

    try:
        result = resolver.resolve({"path": "secret/app", "field": "password"})
    except VaultError as exc:
        print(f"Failed ({exc.kind}): {exc}", file=sys.stderr)
        return 1

    print(f"Resolved value: {result['value']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
