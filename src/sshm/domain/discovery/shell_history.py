"""Username lookup in shell history files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

# zsh EXTENDED_HISTORY lines look like ": 1700000000:0;ssh alice@box"
_ZSH_PREFIX = re.compile(r"^:\s*\d+:\d+;")

# ssh(1) options that consume the following argument
_OPTIONS_WITH_VALUE: Final[frozenset[str]] = frozenset("BbcDEeFIiJLlmOopQRSWw")


@dataclass(frozen=True, slots=True)
class SshInvocation:
    host: str
    user: str | None = None


def _strip_history_prefix(line: str) -> str:
    return _ZSH_PREFIX.sub("", line.strip(), count=1).strip()


def parse_ssh_invocation(line: str) -> SshInvocation | None:
    """Extract host and login from an ``ssh`` command line, if it is one."""

    command = _strip_history_prefix(line)
    if not command.startswith("ssh "):
        return None

    args = command.split()[1:]
    destination: str | None = None
    login: str | None = None
    index = 0
    while index < len(args):
        arg = args[index]
        if arg.startswith("-") and len(arg) > 1:
            flags = arg[1:]
            for position, flag in enumerate(flags):
                if flag not in _OPTIONS_WITH_VALUE:
                    continue
                value = flags[position + 1 :]
                if not value and index + 1 < len(args):
                    index += 1
                    value = args[index]
                if flag == "l" and value:
                    login = value
                break
        elif destination is None:
            destination = arg
        else:
            # remote command follows
            break
        index += 1

    if destination is None:
        return None
    user, at, host = destination.partition("@")
    if not at:
        user, host = "", destination
    if not host:
        return None
    return SshInvocation(host=host, user=user or login)


def hostnames_match(left: str, right: str) -> bool:
    """Exact match, or one name is a leading dot-label prefix of the other."""

    if not left or not right:
        return False
    left, right = left.lower(), right.lower()
    return left == right or left.startswith(f"{right}.") or right.startswith(f"{left}.")


@dataclass(slots=True, frozen=True)
class ShellHistory:
    invocations: tuple[SshInvocation, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, lines: Iterable[str]) -> ShellHistory:
        invocations = (parse_ssh_invocation(line) for line in lines)
        return cls(invocations=tuple(item for item in invocations if item is not None))

    def user_for(self, hostname: str) -> str | None:
        """Return the login of the earliest recorded ``ssh`` to ``hostname``."""

        for invocation in self.invocations:
            if invocation.user and hostnames_match(invocation.host, hostname):
                return invocation.user
        return None
