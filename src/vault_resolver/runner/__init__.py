"""Resolution runner: orchestration and CLI."""

from vault_resolver.runner.task import TOKEN_HEADER, ReferenceResolver, resolve_reference, rewrite_v2_path

__all__ = [
    "TOKEN_HEADER",
    "ReferenceResolver",
    "resolve_reference",
    "rewrite_v2_path",
]
