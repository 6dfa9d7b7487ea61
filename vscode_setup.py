#!/usr/bin/env python3
"""
VS Code Setup Automation v1.0

Detects VS Code and its forks, installs a shared set of extensions into the
selected editor and merges a common set of preferences into the user's
settings.json.

Features:
- Detection of code, code-insiders, codium, code-oss and cursor
- Parallel extension installation (already installed extensions are skipped)
- Deep merge into an existing settings.json with a timestamped backup
- Optional jq merge backend that installs jq only for the duration of the merge

Usage:
    vscode-setup
    vscode-setup --editor codium --merge-backend jq

Requirements:
    - Python 3.8+
    - click
    - packaging

License: MIT
"""

import copy
import json
import os
import shutil
import subprocess
import sys
import traceback
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

try:
    import click
    from packaging import version
except ImportError as e:
    print(f"Error: Missing required dependency: {e.name}")
    print("\nPlease install required packages:")
    print("  pip install click packaging")
    sys.exit(1)


__version__ = "1.0.0"


# ============================================================================
# Constants
# ============================================================================

VERSION_TIMEOUT = 10
LIST_TIMEOUT = 30
INSTALL_TIMEOUT = 180
MERGE_TIMEOUT = 30
PACKAGE_TIMEOUT = 300

DEFAULT_EXTENSION_FILE = Path(__file__).resolve().parent / 'extensionlist.txt'
SETTINGS_FILENAME = 'settings.json'
BACKUP_TIMESTAMP_FORMAT = '%Y%m%d_%H%M%S'

# Used only by the jq merge backend
JSON_TOOL = 'jq'
# An empty settings file slurps to [], so .[0] falls back to {}
JQ_MERGE_FILTER = '(.[0] // {}) * $template'

MERGE_BACKENDS = ('native', 'jq')


@dataclass(frozen=True)
class Editor:
    """A VS Code variant and where it keeps its user configuration."""
    command: str
    name: str
    config_dir_name: str


# Detection order is also the menu order
KNOWN_EDITORS: Tuple[Editor, ...] = (
    Editor('code', 'Visual Studio Code', 'Code'),
    Editor('code-insiders', 'Visual Studio Code Insiders', 'Code - Insiders'),
    Editor('codium', 'VSCodium', 'VSCodium'),
    Editor('code-oss', 'Code-OSS', 'Code - OSS'),
    Editor('cursor', 'Cursor', 'Cursor'),
)

# Preferences merged into the user's settings.json
SETTINGS_TEMPLATE: Dict[str, Any] = {
    "workbench.colorTheme": "Gruvbox Dark Hard",
    "workbench.iconTheme": "material-icon-theme",
    "material-icon-theme.folders.associations": {
        "venv": "environment",
        "references": "docs",
        "modeling": "generator"
    },
    "editor.formatOnSave": True,
    "[python]": {
        "editor.formatOnType": True,
        "editor.defaultFormatter": "charliermarsh.ruff"
    },
    "jupyter.interactiveWindow.textEditor.executeSelection": True
}


@dataclass(frozen=True)
class PackageManager:
    """Install/remove recipe for a system package manager.

    Command templates are argv tuples; ``{package}`` is substituted with the
    package name.  Every command of a recipe must succeed for the recipe to
    count as successful.
    """
    name: str
    probe: str
    install: Tuple[Tuple[str, ...], ...]
    remove: Tuple[Tuple[str, ...], ...]

    def install_commands(self, package: str) -> List[List[str]]:
        return _render_commands(self.install, package)

    def remove_commands(self, package: str) -> List[List[str]]:
        return _render_commands(self.remove, package)


def _render_commands(templates: Tuple[Tuple[str, ...], ...], package: str) -> List[List[str]]:
    return [[arg.format(package=package) for arg in template] for template in templates]


# First one found on PATH wins
PACKAGE_MANAGERS: Tuple[PackageManager, ...] = (
    PackageManager(
        'apt', 'apt-get',
        install=(('sudo', 'apt-get', 'install', '-y', '-qq', '{package}'),),
        remove=(('sudo', 'apt-get', 'remove', '-y', '-qq', '{package}'),
                ('sudo', 'apt-get', 'autoremove', '-y', '-qq')),
    ),
    PackageManager(
        'pacman', 'pacman',
        install=(('sudo', 'pacman', '-Sy', '--noconfirm', '{package}'),),
        remove=(('sudo', 'pacman', '-Rns', '--noconfirm', '{package}'),),
    ),
    PackageManager(
        'dnf', 'dnf',
        install=(('sudo', 'dnf', 'install', '-y', '-q', '{package}'),),
        remove=(('sudo', 'dnf', 'remove', '-y', '-q', '{package}'),),
    ),
    PackageManager(
        'yum', 'yum',
        install=(('sudo', 'yum', 'install', '-y', '-q', '{package}'),),
        remove=(('sudo', 'yum', 'remove', '-y', '-q', '{package}'),),
    ),
    PackageManager(
        'brew', 'brew',
        install=(('brew', 'install', '{package}'),),
        remove=(('brew', 'uninstall', '{package}'),),
    ),
)


class InstallStatus(Enum):
    INSTALLED = 'installed'
    SKIPPED = 'skipped'
    FAILED = 'failed'


@dataclass(frozen=True)
class InstallResult:
    """Outcome of one extension install attempt."""
    extension_id: str
    status: InstallStatus
    detail: str = ''


@dataclass(frozen=True)
class InstallSummary:
    """Install results in extension-list order."""
    results: Tuple[InstallResult, ...]

    def _count(self, status: InstallStatus) -> int:
        return sum(1 for result in self.results if result.status is status)

    @property
    def installed(self) -> int:
        return self._count(InstallStatus.INSTALLED)

    @property
    def skipped(self) -> int:
        return self._count(InstallStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(InstallStatus.FAILED)

    @property
    def total(self) -> int:
        return len(self.results)


class MergeOutcome(Enum):
    CREATED = 'created'
    MERGED = 'merged'
    SKIPPED = 'skipped'
    FAILED = 'failed'


# ============================================================================
# Errors
# ============================================================================

class SetupError(Exception):
    """A precondition failure that stops the whole run."""


class EditorNotFoundError(SetupError):
    """No usable editor is available (or the requested one is missing)."""


class ExtensionListNotFoundError(SetupError):
    """The extension list file does not exist."""


# ============================================================================
# Terminal Colors
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY terminals)."""
        cls.HEADER = ''
        cls.OKBLUE = ''
        cls.OKCYAN = ''
        cls.OKGREEN = ''
        cls.WARNING = ''
        cls.FAIL = ''
        cls.ENDC = ''
        cls.BOLD = ''


if not sys.stdout.isatty():
    Colors.disable()


# ============================================================================
# Output Functions
# ============================================================================

def print_banner() -> None:
    """Print application banner."""
    banner = f"""
{Colors.OKCYAN}{Colors.BOLD}╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║                  VS Code Setup Automation                    ║
║            Extensions & Settings for VS Code Forks           ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝{Colors.ENDC}
"""
    print(banner)


def print_header(message: str) -> None:
    """Print a stage header."""
    print(f"\n{Colors.HEADER}{Colors.BOLD}━━━ {message} ━━━{Colors.ENDC}\n")


def print_success(message: str, indent: int = 2) -> None:
    """Print success message."""
    print(f"{' ' * indent}{Colors.OKGREEN}✓{Colors.ENDC} {message}")


def print_error(message: str, indent: int = 2) -> None:
    """Print error message."""
    print(f"{' ' * indent}{Colors.FAIL}✗{Colors.ENDC} {message}")


def print_warning(message: str, indent: int = 2) -> None:
    """Print warning message."""
    print(f"{' ' * indent}{Colors.WARNING}⚠{Colors.ENDC} {message}")


def print_info(message: str, indent: int = 2) -> None:
    """Print info message."""
    print(f"{' ' * indent}{Colors.OKCYAN}ℹ{Colors.ENDC} {message}")


# ============================================================================
# Editor Detection & Selection
# ============================================================================

def detect_editors(
    which: Optional[Callable[[str], Optional[str]]] = None
) -> Tuple[Editor, ...]:
    """Return the known editors whose command resolves on PATH, in priority order."""
    which = which or shutil.which

    found = []
    for editor in KNOWN_EDITORS:
        if which(editor.command):
            found.append(editor)
            print_success(f"Found: {editor.name} ({editor.command})")

    return tuple(found)


def get_editor_version(editor: Editor) -> Optional[str]:
    """Get the editor version from ``--version``, or None if it can't be read."""
    try:
        result = subprocess.run(
            [editor.command, '--version'],
            capture_output=True,
            text=True,
            check=True,
            timeout=VERSION_TIMEOUT
        )
    except (subprocess.TimeoutExpired, subprocess.CalledProcessError, OSError):
        return None

    lines = result.stdout.strip().splitlines()
    version_str = lines[0].strip() if lines else ''

    try:
        version.Version(version_str)
    except version.InvalidVersion:
        return None

    return version_str


def parse_selection(reply: str, count: int) -> Optional[int]:
    """Parse a 1-based menu choice; None unless it is an integer in [1, count]."""
    reply = reply.strip()
    if not reply.isdecimal():
        return None

    choice = int(reply)
    if 1 <= choice <= count:
        return choice
    return None


def select_editor(
    editors: Sequence[Editor],
    preferred: Optional[str] = None,
    prompt: Optional[Callable[[str], str]] = None
) -> Editor:
    """Pick the editor to configure.

    ``preferred`` is a command name given on the command line and bypasses
    the menu.  A single detected editor is selected without prompting;
    otherwise the user is asked until they enter a valid number.
    """
    if not editors:
        raise EditorNotFoundError("No supported editor detected")

    if preferred:
        wanted = preferred.strip().lower()
        for editor in editors:
            if editor.command == wanted:
                print_success(f"Selected: {editor.name}")
                return editor
        raise EditorNotFoundError(f"Editor '{preferred}' was not detected on this machine")

    if len(editors) == 1:
        print_info(f"Automatically selecting: {editors[0].name}")
        return editors[0]

    prompt = prompt or input
    count = len(editors)

    print(f"{Colors.OKCYAN}Select an editor:{Colors.ENDC}")
    for index, editor in enumerate(editors, start=1):
        print(f"  {index}. {editor.name}")
    print()

    while True:
        choice = parse_selection(prompt(f"Enter selection (1-{count}): "), count)
        if choice is not None:
            break
        print_error(f"Invalid selection. Please enter a number between 1 and {count}")

    selected = editors[choice - 1]
    print_success(f"Selected: {selected.name}")
    return selected


# ============================================================================
# Extension Installation
# ============================================================================

def load_extensions(path: Path) -> List[str]:
    """Read extension ids, one per line.

    Blank lines and ``#`` comments are ignored; duplicates (compared
    case-insensitively) keep their first occurrence.
    """
    if not path.is_file():
        raise ExtensionListNotFoundError(f"Extension list file not found: {path}")

    extensions = []
    seen = set()
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        ext_id = raw_line.split('#', 1)[0].strip()
        if not ext_id or ext_id.lower() in seen:
            continue
        seen.add(ext_id.lower())
        extensions.append(ext_id)

    return extensions


def list_installed_extensions(editor: Editor) -> frozenset:
    """Snapshot of installed extension ids (lower-cased) from a single query."""
    try:
        result = subprocess.run(
            [editor.command, '--list-extensions'],
            capture_output=True,
            text=True,
            check=True,
            timeout=LIST_TIMEOUT
        )
    except subprocess.TimeoutExpired:
        print_warning("Extension listing timed out, assuming nothing is installed")
        return frozenset()
    except (subprocess.CalledProcessError, OSError) as e:
        print_warning(f"Could not list installed extensions: {e}")
        return frozenset()

    return frozenset(
        line.strip().lower() for line in result.stdout.splitlines() if line.strip()
    )


def install_single_extension(
    editor: Editor,
    extension_id: str,
    installed: frozenset
) -> InstallResult:
    """Install one extension unless it is already in the snapshot."""
    if extension_id.lower() in installed:
        return InstallResult(extension_id, InstallStatus.SKIPPED)

    try:
        result = subprocess.run(
            [editor.command, '--install-extension', extension_id],
            capture_output=True,
            text=True,
            timeout=INSTALL_TIMEOUT
        )
    except subprocess.TimeoutExpired:
        return InstallResult(extension_id, InstallStatus.FAILED, 'installation timed out')
    except OSError as e:
        return InstallResult(extension_id, InstallStatus.FAILED, str(e))

    if result.returncode != 0:
        output = (result.stderr or result.stdout or '').strip().splitlines()
        detail = output[-1] if output else f"exit code {result.returncode}"
        return InstallResult(extension_id, InstallStatus.FAILED, detail)

    return InstallResult(extension_id, InstallStatus.INSTALLED)


def install_extensions(
    editor: Editor,
    extensions: Sequence[str],
    max_workers: Optional[int] = None
) -> InstallSummary:
    """Install all extensions concurrently and report them in list order."""
    print_info("Checking currently installed extensions...")
    installed = list_installed_extensions(editor)

    if not extensions:
        print_warning("Extension list is empty, nothing to install")
        return InstallSummary(())

    print_info("Installing extensions in parallel...")
    print()

    with ThreadPoolExecutor(max_workers=max_workers or len(extensions)) as executor:
        futures = [
            executor.submit(install_single_extension, editor, ext_id, installed)
            for ext_id in extensions
        ]
        wait(futures)

    results = []
    for ext_id, future in zip(extensions, futures):
        error = future.exception()
        if error is not None:
            results.append(InstallResult(ext_id, InstallStatus.FAILED, str(error)))
        else:
            results.append(future.result())

    summary = InstallSummary(tuple(results))
    report_install_summary(summary)
    return summary


def report_install_summary(summary: InstallSummary) -> None:
    for result in summary.results:
        if result.status is InstallStatus.INSTALLED:
            print_success(f"{result.extension_id}: installed")
        elif result.status is InstallStatus.SKIPPED:
            print_warning(f"{result.extension_id}: already installed")
        else:
            print_error(f"{result.extension_id}: failed")
            if result.detail:
                print_info(result.detail, 4)

    print()
    print_info(f"Summary: {Colors.OKGREEN}{summary.installed}{Colors.ENDC} installed, "
               f"{Colors.WARNING}{summary.skipped}{Colors.ENDC} skipped, "
               f"{Colors.FAIL}{summary.failed}{Colors.ENDC} failed")


# ============================================================================
# Settings Configuration
# ============================================================================

def get_config_dir(
    editor: Editor,
    platform: Optional[str] = None,
    home: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None
) -> Path:
    """Find the editor's user configuration directory.

    macOS keeps it under ``~/Library/Application Support``; every other
    platform uses ``$XDG_CONFIG_HOME`` (``~/.config`` by default).
    """
    platform = platform or sys.platform
    home = home or Path.home()
    env = os.environ if env is None else env

    if platform == 'darwin':
        config_base = home / 'Library' / 'Application Support'
    else:
        config_base = Path(env.get('XDG_CONFIG_HOME') or home / '.config')

    return config_base / editor.config_dir_name / 'User'


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Right-biased recursive merge of two JSON objects.

    Nested objects are merged key by key; any other value from ``override``
    (lists included) replaces the one in ``base``.  Neither input is modified.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def backup_settings(settings_path: Path, now: Optional[datetime] = None) -> Path:
    """Copy the settings file to ``<name>.backup.<timestamp>`` next to it.

    An existing backup is never overwritten; a ``_<n>`` counter is appended
    to the timestamp instead.
    """
    stamp = (now or datetime.now()).strftime(BACKUP_TIMESTAMP_FORMAT)
    backup_path = settings_path.with_name(f"{settings_path.name}.backup.{stamp}")
    counter = 1
    while backup_path.exists():
        backup_path = settings_path.with_name(f"{settings_path.name}.backup.{stamp}_{counter}")
        counter += 1
    shutil.copy2(settings_path, backup_path)
    return backup_path


def write_settings(settings_path: Path, settings: Dict[str, Any]) -> None:
    settings_path.write_text(
        json.dumps(settings, indent=2, ensure_ascii=False) + '\n',
        encoding='utf-8'
    )


def merge_settings_native(settings_path: Path, template: Dict[str, Any]) -> MergeOutcome:
    """Merge the template into the settings file in-process."""
    print_info("Merging with existing settings...")

    try:
        content = settings_path.read_text(encoding='utf-8')
        existing = json.loads(content) if content.strip() else {}
    except UnicodeDecodeError as e:
        print_error(f"{settings_path.name} is not valid UTF-8: {e}")
        print_warning("Settings merge skipped, original file left untouched")
        return MergeOutcome.FAILED
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON in {settings_path.name}: {e}")
        print_warning("Settings merge skipped, original file left untouched")
        return MergeOutcome.FAILED

    if not isinstance(existing, dict):
        print_error(f"{settings_path.name} does not contain a JSON object")
        print_warning("Settings merge skipped, original file left untouched")
        return MergeOutcome.FAILED

    write_settings(settings_path, deep_merge(existing, template))
    print_success("Settings merged successfully")
    return MergeOutcome.MERGED


def find_package_manager(
    managers: Sequence[PackageManager] = PACKAGE_MANAGERS,
    which: Optional[Callable[[str], Optional[str]]] = None
) -> Optional[PackageManager]:
    """Return the first package manager whose executable is on PATH."""
    which = which or shutil.which
    for manager in managers:
        if which(manager.probe):
            return manager
    return None


def _run_commands(commands: List[List[str]], timeout: int) -> bool:
    for command in commands:
        try:
            result = subprocess.run(command, capture_output=True, text=True, timeout=timeout)
        except (subprocess.TimeoutExpired, OSError):
            return False
        if result.returncode != 0:
            return False
    return True


def install_package(manager: PackageManager, package: str) -> bool:
    """Install a package with the given package manager."""
    print_info(f"Installing {package} temporarily...")

    if _run_commands(manager.install_commands(package), PACKAGE_TIMEOUT):
        print_success(f"{package} installed successfully")
        return True

    print_error(f"Failed to install {package}")
    return False


def remove_package(manager: PackageManager, package: str) -> bool:
    """Remove a package that was installed for this run only."""
    print_info(f"Removing temporarily installed {package}...")

    if _run_commands(manager.remove_commands(package), PACKAGE_TIMEOUT):
        print_success(f"{package} removed successfully")
        return True

    print_warning(f"Could not remove {package}, please remove it with {manager.name}")
    return False


def merge_with_jq(settings_path: Path, template: Dict[str, Any]) -> bool:
    """Merge the template into the settings file with jq (``JQ_MERGE_FILTER``)."""
    try:
        result = subprocess.run(
            [JSON_TOOL, '-s', '--argjson', 'template', json.dumps(template),
             JQ_MERGE_FILTER, str(settings_path)],
            capture_output=True,
            text=True,
            check=True,
            timeout=MERGE_TIMEOUT
        )
        merged = json.loads(result.stdout)
    except subprocess.CalledProcessError as e:
        error_msg = e.stderr.strip() if e.stderr else str(e)
        print_error(f"{JSON_TOOL} merge failed: {error_msg}")
        return False
    except subprocess.TimeoutExpired:
        print_error(f"{JSON_TOOL} merge timed out")
        return False
    except (OSError, ValueError) as e:
        print_error(f"{JSON_TOOL} merge failed: {e}")
        return False

    write_settings(settings_path, merged)
    return True


def merge_settings_jq(
    settings_path: Path,
    template: Dict[str, Any],
    which: Optional[Callable[[str], Optional[str]]] = None
) -> MergeOutcome:
    """Merge with jq, installing it for the duration of the merge if needed."""
    which = which or shutil.which
    temporary_from = None

    if which(JSON_TOOL):
        print_info(f"Using existing {JSON_TOOL} installation")
    else:
        manager = find_package_manager(which=which)
        if manager is None:
            print_error("No supported package manager found")
            print_warning("Settings merge skipped")
            return MergeOutcome.SKIPPED

        if not install_package(manager, JSON_TOOL):
            print_error(f"Could not install {JSON_TOOL} automatically")
            print_warning("Settings merge skipped")
            return MergeOutcome.FAILED
        temporary_from = manager

    try:
        print_info("Merging with existing settings...")
        merged = merge_with_jq(settings_path, template)
    finally:
        if temporary_from is not None:
            remove_package(temporary_from, JSON_TOOL)

    if not merged:
        print_warning("Settings merge skipped, original file left untouched")
        return MergeOutcome.FAILED

    print_success("Settings merged successfully")
    return MergeOutcome.MERGED


def configure_settings(
    editor: Editor,
    template: Optional[Dict[str, Any]] = None,
    backend: str = 'native',
    config_dir: Optional[Path] = None,
    now: Optional[datetime] = None
) -> MergeOutcome:
    """Create or update the editor's settings.json from the template.

    An existing file is always backed up before it is touched.
    """
    template = SETTINGS_TEMPLATE if template is None else template
    config_dir = config_dir or get_config_dir(editor)
    settings_path = config_dir / SETTINGS_FILENAME

    try:
        if not config_dir.is_dir():
            print_info(f"Creating config directory: {config_dir}")
            config_dir.mkdir(parents=True, exist_ok=True)

        if not settings_path.exists():
            print_info(f"Creating new {SETTINGS_FILENAME}")
            write_settings(settings_path, template)
            print_success("Settings file created")
            return MergeOutcome.CREATED

        print_info(f"Existing {SETTINGS_FILENAME} found")
        backup_path = backup_settings(settings_path, now)
        print_success(f"Backup created: {backup_path.name}")

        if backend == 'jq':
            return merge_settings_jq(settings_path, template)
        return merge_settings_native(settings_path, template)

    except PermissionError as e:
        print_error(f"Permission denied: {e.filename or config_dir}")
        return MergeOutcome.FAILED
    except OSError as e:
        print_error(f"Failed to update settings: {e}")
        return MergeOutcome.FAILED


# ============================================================================
# Main Application
# ============================================================================

def main(
    preferred_editor: Optional[str] = None,
    extensions_file: Path = DEFAULT_EXTENSION_FILE,
    merge_backend: str = 'native',
    skip_extensions: bool = False,
    skip_settings: bool = False,
    prompt: Optional[Callable[[str], str]] = None
) -> int:
    """Run detection, selection, installation and settings; return the exit code."""
    print_banner()

    extensions: List[str] = []
    if not skip_extensions:
        try:
            extensions = load_extensions(Path(extensions_file))
        except ExtensionListNotFoundError as e:
            print_error(str(e), 0)
            return 1

    print_header("Detecting VS Code Editors")
    editors = detect_editors()
    if not editors:
        print_error("No VS Code editors found!", 0)
        print_info("Please install one of: "
                   + ", ".join(editor.command for editor in KNOWN_EDITORS), 0)
        return 1
    print()

    try:
        editor = select_editor(editors, preferred_editor, prompt)
    except EditorNotFoundError as e:
        print_error(str(e), 0)
        print_info("Detected: " + ", ".join(editor.command for editor in editors), 0)
        return 1

    editor_version = get_editor_version(editor)
    if editor_version:
        print_info(f"{editor.name} version: {editor_version}")

    summary = None
    if skip_extensions:
        print_info("Skipping extension installation")
    else:
        print_header(f"Installing Extensions for {editor.name}")
        summary = install_extensions(editor, extensions)

    outcome = None
    if skip_settings:
        print_info("Skipping settings configuration")
    else:
        print_header(f"Configuring Settings for {editor.name}")
        outcome = configure_settings(editor, backend=merge_backend)

    print_header("Setup Complete!")

    if summary is not None:
        if summary.failed:
            print_warning(f"{summary.failed} of {summary.total} extensions failed to install", 0)
        else:
            print_success("Extensions have been installed", 0)

    if outcome in (MergeOutcome.CREATED, MergeOutcome.MERGED):
        print_success("Settings have been configured", 0)
    elif outcome is not None:
        print_warning("Settings were not updated", 0)

    print_info(f"You may need to restart {editor.name} for all changes to take effect", 0)
    print()
    return 0


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option(
    '--editor', 'preferred_editor',
    metavar='COMMAND',
    default=None,
    help='Editor command to configure (code, code-insiders, codium, code-oss, cursor). '
         'Skips the selection menu.',
)
@click.option(
    '--extensions-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_EXTENSION_FILE,
    show_default=True,
    help='File listing extension ids, one per line.',
)
@click.option(
    '--merge-backend',
    type=click.Choice(MERGE_BACKENDS),
    default='native',
    show_default=True,
    help='How settings.json is merged: in-process, or with a (temporarily installed) jq.',
)
@click.option('--skip-extensions', is_flag=True, help='Do not install extensions.')
@click.option('--skip-settings', is_flag=True, help='Do not touch settings.json.')
@click.version_option(version=__version__, prog_name='vscode-setup')
def cli(
    preferred_editor: Optional[str],
    extensions_file: Path,
    merge_backend: str,
    skip_extensions: bool,
    skip_settings: bool
) -> None:
    """Install shared extensions and settings into VS Code or one of its forks."""
    try:
        exit_code = main(
            preferred_editor=preferred_editor,
            extensions_file=extensions_file,
            merge_backend=merge_backend,
            skip_extensions=skip_extensions,
            skip_settings=skip_settings,
        )
    except (EOFError, KeyboardInterrupt):
        print(f"\n\n{Colors.WARNING}Setup cancelled by user{Colors.ENDC}\n")
        exit_code = 130
    except Exception as e:
        print(f"\n{Colors.FAIL}Unexpected error: {e}{Colors.ENDC}\n")
        traceback.print_exc()
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
