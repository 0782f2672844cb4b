#!/usr/bin/env python3
"""Management helpers for bootstrapping the authgate service."""
from __future__ import annotations

import argparse
import secrets
import sys
from pathlib import Path
from typing import Dict, Iterable, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from authgate import database
from authgate.auth.passwords import hash_password
from authgate.auth.store import CredentialStore, init_auth_storage, normalize_email


def _update_env_file(env_path: Path, updates: Dict[str, str]) -> None:
    lines: List[str]
    if env_path.exists():
        lines = env_path.read_text().splitlines()
    else:
        lines = []

    rendered: List[str] = []
    seen: set[str] = set()
    for line in lines:
        key, sep, _value = line.partition("=")
        stripped_key = key.strip()
        if sep and stripped_key in updates:
            rendered.append(f"{stripped_key}={updates[stripped_key]}")
            seen.add(stripped_key)
        else:
            rendered.append(line)

    for key, value in updates.items():
        if key not in seen:
            rendered.append(f"{key}={value}")

    env_path.write_text("\n".join(rendered) + "\n")


def _command_create_admin(args: argparse.Namespace) -> int:
    email = normalize_email(args.email)
    if not args.name or not email or not args.password:
        print("Name, email, and password are required", file=sys.stderr)
        return 2

    init_auth_storage()
    with database.get_database().session() as session:
        store = CredentialStore(session)
        existing = store.find_by_email(email)
        if existing:
            if not args.force:
                print(f"User '{email}' already exists; skipping")
                return 0
            existing.hashed_password = hash_password(args.password)
            existing.is_admin = True
            session.add(existing)
            session.commit()
            session.refresh(existing)
            print(f"Updated password for existing admin '{existing.email}'")
            return 0

        user = store.create(
            name=args.name,
            email=email,
            hashed_password=hash_password(args.password),
            is_admin=True,
        )
        print(f"Created admin '{user.email}' (id={user.id})")
        return 0


def _command_rotate_secrets(args: argparse.Namespace) -> int:
    env_path = Path(args.env_file).expanduser().resolve()
    updates = {"JWT_SECRET": secrets.token_urlsafe(48)}
    env_path.parent.mkdir(parents=True, exist_ok=True)
    _update_env_file(env_path, updates)
    print(f"Wrote new secrets to {env_path}")
    print("Restart the service to apply them; tokens signed with the old secret stop verifying.")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--database-url",
        dest="database_url",
        help="Override the credential database URL",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_admin = subparsers.add_parser(
        "create-admin", help="Create or promote an administrator account",
    )
    create_admin.add_argument("--name", required=True)
    create_admin.add_argument("--email", required=True)
    create_admin.add_argument("--password", required=True)
    create_admin.add_argument(
        "--force",
        action="store_true",
        help="Reset the password and grant admin if the account already exists",
    )
    create_admin.set_defaults(func=_command_create_admin)

    rotate = subparsers.add_parser(
        "rotate-secrets", help="Generate a new JWT signing secret in the env file",
    )
    rotate.add_argument(
        "--env-file",
        default=".env",
        help="Path to the environment file (default: %(default)s)",
    )
    rotate.set_defaults(func=_command_rotate_secrets)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.database_url:
        database.use_database(args.database_url)

    handler = getattr(args, "func", None)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
