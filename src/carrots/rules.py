"""Permission policy: classify an entry by name and position, compare its mode."""

from __future__ import annotations

import functools
import os
import re
from dataclasses import dataclass
from typing import Callable

from carrots.models import FileEntry

SSH_DIR_NAME = ".ssh"

# SSH key filenames, private or public
SSH_KEY_PATTERN = re.compile(r"^id_.+$")
SSH_PUBLIC_KEY_PATTERN = re.compile(r"^id_.+\.pub$")

MODE_SSH_DIR = 0o700
MODE_SSH_CONFIG = 0o400
MODE_SSH_PRIVATE_KEY = 0o600
MODE_SSH_PUBLIC_KEY = 0o644
MODE_AUTHORIZED_KEYS = 0o600
MODE_KNOWN_HOSTS = 0o644
MODE_HOME_DIR = 0o755


def format_warning(path: str, expected: int, actual: int) -> str:
    """Render a discrepancy line, e.g. ``.ssh/id_rsa: expected chmod 0600, got 0644``."""
    return f"{path}: expected chmod {expected:04o}, got {actual:04o}"


def is_ssh_dir(entry: FileEntry) -> bool:
    # name only: a regular file called .ssh is checked too
    return entry.name == SSH_DIR_NAME


def is_ssh_config(entry: FileEntry) -> bool:
    return entry.name == "config" and entry.parent == SSH_DIR_NAME


def is_ssh_private_key(entry: FileEntry) -> bool:
    return (
        entry.parent == SSH_DIR_NAME
        and SSH_KEY_PATTERN.match(entry.name) is not None
        and SSH_PUBLIC_KEY_PATTERN.match(entry.name) is None
    )


def is_ssh_public_key(entry: FileEntry) -> bool:
    return entry.parent == SSH_DIR_NAME and SSH_PUBLIC_KEY_PATTERN.match(entry.name) is not None


def is_authorized_keys(entry: FileEntry) -> bool:
    return entry.name == "authorized_keys"


def is_known_hosts(entry: FileEntry) -> bool:
    return entry.name == "known_hosts"


def is_home_dir(home_name: str, entry: FileEntry) -> bool:
    return bool(home_name) and entry.name == home_name


@dataclass(frozen=True)
class Rule:
    """A classification predicate paired with the mode its matches must carry."""

    name: str
    expected_mode: int
    applies: Callable[[FileEntry], bool]

    def check(self, entry: FileEntry) -> str | None:
        """Return a discrepancy for ``entry``, or None if inapplicable or compliant."""
        if not self.applies(entry):
            return None
        actual = entry.mode % 0o1000
        if actual == self.expected_mode:
            return None
        return format_warning(entry.path, self.expected_mode, actual)


def home_name(home: str) -> str:
    """Base name of a home directory path, tolerating a trailing separator."""
    return os.path.basename(os.path.normpath(home)) if home else ""


def build_rules(home: str) -> tuple[Rule, ...]:
    """Assemble the policy in evaluation order. ``home`` binds the home-directory rule."""
    return (
        Rule("ssh_dir", MODE_SSH_DIR, is_ssh_dir),
        Rule("ssh_config", MODE_SSH_CONFIG, is_ssh_config),
        Rule("ssh_private_key", MODE_SSH_PRIVATE_KEY, is_ssh_private_key),
        Rule("ssh_public_key", MODE_SSH_PUBLIC_KEY, is_ssh_public_key),
        Rule("authorized_keys", MODE_AUTHORIZED_KEYS, is_authorized_keys),
        Rule("known_hosts", MODE_KNOWN_HOSTS, is_known_hosts),
        Rule("home_dir", MODE_HOME_DIR, functools.partial(is_home_dir, home_name(home))),
    )
