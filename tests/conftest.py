"""Shared fixtures: fake editor/package-manager processes and config dirs."""

import json
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional

import pytest

import vscode_setup as mod


class FakeRunner:
    """Stand-in for ``subprocess.run`` that answers editor, jq and package
    manager invocations and records every argv it was given."""

    def __init__(
        self,
        installed: Iterable[str] = (),
        failing: Iterable[str] = (),
        editor_version: str = '1.95.3',
        list_fails: bool = False,
        package_fails: bool = False,
        jq_fails: bool = False,
    ):
        self.installed = list(installed)
        self.failing = set(failing)
        self.editor_version = editor_version
        self.list_fails = list_fails
        self.package_fails = package_fails
        self.jq_fails = jq_fails
        self.calls: List[List[str]] = []

    def __call__(self, cmd, input: Optional[str] = None, check: bool = False, **kwargs):
        cmd = list(cmd)
        self.calls.append(cmd)

        if cmd[0] == mod.JSON_TOOL:
            return self._jq(cmd, input, check)
        if cmd[0] in ('sudo', 'brew'):
            code = 100 if self.package_fails else 0
            return subprocess.CompletedProcess(cmd, code, stdout='', stderr='')

        flag = cmd[1]
        if flag == '--version':
            return subprocess.CompletedProcess(
                cmd, 0, stdout=f"{self.editor_version}\nabcdef\nx64\n", stderr='')
        if flag == '--list-extensions':
            if self.list_fails:
                raise subprocess.CalledProcessError(1, cmd, stderr='boom')
            return subprocess.CompletedProcess(
                cmd, 0, stdout=''.join(f"{ext}\n" for ext in self.installed), stderr='')
        if flag == '--install-extension':
            if cmd[2] in self.failing:
                return subprocess.CompletedProcess(
                    cmd, 1, stdout='',
                    stderr=f"Extension '{cmd[2]}' not found.\nFailed Installing Extensions: {cmd[2]}")
            return subprocess.CompletedProcess(
                cmd, 0, stdout=f"Extension '{cmd[2]}' was successfully installed.", stderr='')
        raise AssertionError(f"Unexpected command: {cmd}")

    def _jq(self, cmd, stdin, check):
        # jq -s --argjson template <json> <filter> <settings>
        if self.jq_fails:
            err = subprocess.CalledProcessError(5, cmd, stderr='jq: error: cannot merge')
            if check:
                raise err
            return subprocess.CompletedProcess(cmd, 5, stdout='', stderr=err.stderr)
        content = Path(cmd[-1]).read_text(encoding='utf-8')
        existing = json.loads(content) if content.strip() else {}
        merged = mod.deep_merge(existing, json.loads(cmd[4]))
        return subprocess.CompletedProcess(cmd, 0, stdout=json.dumps(merged), stderr='')

    def commands_with(self, flag: str) -> List[List[str]]:
        return [cmd for cmd in self.calls if flag in cmd]


def which_for(*commands: str):
    """Build a ``shutil.which`` replacement that only resolves ``commands``."""
    available = set(commands)
    return lambda name: f"/usr/bin/{name}" if name in available else None


@pytest.fixture
def codium() -> mod.Editor:
    return next(e for e in mod.KNOWN_EDITORS if e.command == 'codium')


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / 'VSCodium' / 'User'
