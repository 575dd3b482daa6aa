from __future__ import annotations

import pytest

from sshm.domain.discovery import ShellHistory, SshInvocation, hostnames_match, parse_ssh_invocation


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("ssh alice@box", SshInvocation(host="box", user="alice")),
        ("ssh -l bob box.example.com", SshInvocation(host="box.example.com", user="bob")),
        ("ssh -lbob box", SshInvocation(host="box", user="bob")),
        ("ssh box -l carol", SshInvocation(host="box", user="carol")),
        ("ssh -p 2222 dave@10.0.0.5", SshInvocation(host="10.0.0.5", user="dave")),
        ("ssh -i ~/.ssh/id -p 22 box", SshInvocation(host="box", user=None)),
        ("ssh -vp 2222 erin@box uptime", SshInvocation(host="box", user="erin")),
        (": 1700000000:0;ssh frank@box", SshInvocation(host="box", user="frank")),
        ("  ssh -A gina@box  ", SshInvocation(host="box", user="gina")),
    ],
)
def test_parse_ssh_invocation(line: str, expected: SshInvocation) -> None:
    assert parse_ssh_invocation(line) == expected


@pytest.mark.parametrize(
    "line",
    ["ls -la", "sshfs box:/ /mnt", "ssh", "ssh -p 2222", "git push", "echo ssh box"],
)
def test_non_ssh_lines_are_ignored(line: str) -> None:
    assert parse_ssh_invocation(line) is None


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("box", "box", True),
        ("BOX", "box", True),
        ("box", "box.example.com", True),
        ("box.example.com", "box", True),
        ("box", "boxer.example.com", False),
        ("ox", "box.example.com", False),
        ("", "box", False),
    ],
)
def test_hostnames_match(left: str, right: str, *, expected: bool) -> None:
    assert hostnames_match(left, right) is expected


def test_user_for_returns_earliest_matching_login() -> None:
    history = ShellHistory.parse(
        [
            "ssh box",
            ": 1700000000:0;ssh -p 2222 alice@box",
            "ssh bob@box.example.com",
            "ssh carol@boxer",
        ]
    )

    assert history.user_for("box.example.com") == "alice"
    assert history.user_for("boxer") == "carol"
    assert history.user_for("other") is None


def test_option_values_are_never_taken_for_hosts() -> None:
    history = ShellHistory.parse(["ssh -p 2222 -l root 10.0.0.5"])

    assert history.user_for("2222") is None
    assert history.user_for("10.0.0.5") == "root"
