"""
Tests for editor detection and selection.

Detection is driven through an injected ``which`` so no real editor has to
be installed; selection is driven through an injected prompt.
"""

import itertools
import subprocess
from unittest.mock import MagicMock, patch

import pytest

import vscode_setup as mod
from conftest import FakeRunner, which_for

detect_editors = mod.detect_editors
select_editor = mod.select_editor
parse_selection = mod.parse_selection
get_editor_version = mod.get_editor_version

ALL_COMMANDS = [editor.command for editor in mod.KNOWN_EDITORS]
ALL_SUBSETS = [
    combo
    for size in range(len(ALL_COMMANDS) + 1)
    for combo in itertools.combinations(ALL_COMMANDS, size)
]


# ===========================================================================
# 1. detect_editors
# ===========================================================================

class TestDetectEditors:

    @pytest.mark.parametrize('present', ALL_SUBSETS)
    def test_returns_exactly_the_present_editors_in_priority_order(self, present):
        found = detect_editors(which=which_for(*present))
        assert [e.command for e in found] == [c for c in ALL_COMMANDS if c in present]

    def test_order_ignores_probe_answers_order(self):
        # reversed input still comes back in the fixed order
        found = detect_editors(which=which_for('cursor', 'code'))
        assert [e.command for e in found] == ['code', 'cursor']

    def test_nothing_found_returns_empty_tuple(self):
        assert detect_editors(which=which_for()) == ()

    def test_returns_immutable_sequence(self):
        found = detect_editors(which=which_for('codium'))
        assert isinstance(found, tuple)

    def test_uses_shutil_which_by_default(self):
        with patch.object(mod.shutil, 'which', side_effect=which_for('code-oss')) as which:
            found = detect_editors()
        assert [e.command for e in found] == ['code-oss']
        assert which.call_count == len(mod.KNOWN_EDITORS)

    def test_reports_each_match(self, capsys):
        detect_editors(which=which_for('code', 'codium'))
        out = capsys.readouterr().out
        assert 'Found: Visual Studio Code (code)' in out
        assert 'Found: VSCodium (codium)' in out
        assert 'Cursor' not in out


class TestKnownEditors:

    def test_five_known_variants(self):
        assert ALL_COMMANDS == ['code', 'code-insiders', 'codium', 'code-oss', 'cursor']

    def test_config_dir_names(self):
        names = {e.command: e.config_dir_name for e in mod.KNOWN_EDITORS}
        assert names == {
            'code': 'Code',
            'code-insiders': 'Code - Insiders',
            'codium': 'VSCodium',
            'code-oss': 'Code - OSS',
            'cursor': 'Cursor',
        }


# ===========================================================================
# 2. select_editor
# ===========================================================================

class TestSelectEditor:

    @pytest.fixture
    def two_editors(self):
        return detect_editors(which=which_for('code', 'cursor'))

    def test_single_editor_is_selected_without_prompt(self, codium, capsys):
        prompt = MagicMock()
        assert select_editor((codium,), prompt=prompt) is codium
        prompt.assert_not_called()
        assert 'Automatically selecting: VSCodium' in capsys.readouterr().out

    def test_valid_choice_selects_editor(self, two_editors):
        prompt = MagicMock(return_value='2')
        assert select_editor(two_editors, prompt=prompt).command == 'cursor'
        prompt.assert_called_once_with('Enter selection (1-2): ')

    def test_reprompts_until_valid(self, two_editors, capsys):
        prompt = MagicMock(side_effect=['abc', '', '0', '3', '-1', '1.5', ' 1 '])
        assert select_editor(two_editors, prompt=prompt).command == 'code'
        assert prompt.call_count == 7
        out = capsys.readouterr().out
        assert out.count('Invalid selection') == 6

    def test_menu_is_one_based_in_detection_order(self, two_editors, capsys):
        select_editor(two_editors, prompt=MagicMock(return_value='1'))
        out = capsys.readouterr().out
        assert '  1. Visual Studio Code' in out
        assert '  2. Cursor' in out
        assert out.index('1. Visual Studio Code') < out.index('2. Cursor')

    def test_falls_back_to_builtin_input(self, two_editors):
        with patch('builtins.input', return_value='2'):
            assert select_editor(two_editors).command == 'cursor'

    def test_preferred_editor_skips_menu(self, two_editors):
        prompt = MagicMock()
        assert select_editor(two_editors, preferred='CURSOR', prompt=prompt).command == 'cursor'
        prompt.assert_not_called()

    def test_preferred_editor_not_detected_raises(self, two_editors):
        with pytest.raises(mod.EditorNotFoundError, match='codium'):
            select_editor(two_editors, preferred='codium')

    def test_no_editors_raises(self):
        with pytest.raises(mod.EditorNotFoundError):
            select_editor(())

    def test_interrupt_propagates(self, two_editors):
        with pytest.raises(EOFError):
            select_editor(two_editors, prompt=MagicMock(side_effect=EOFError))


class TestParseSelection:

    @pytest.mark.parametrize('reply, expected', [
        ('1', 1),
        ('3', 3),
        ('  2\n', 2),
        ('0', None),
        ('4', None),
        ('', None),
        ('two', None),
        ('+1', None),
        ('-1', None),
        ('1e0', None),
    ])
    def test_parse(self, reply, expected):
        assert parse_selection(reply, 3) == expected


# ===========================================================================
# 3. get_editor_version
# ===========================================================================

class TestGetEditorVersion:

    def test_reads_first_line(self, codium):
        with patch.object(mod.subprocess, 'run', FakeRunner(editor_version='1.109.51242')):
            assert get_editor_version(codium) == '1.109.51242'

    def test_invalid_version_returns_none(self, codium):
        with patch.object(mod.subprocess, 'run', FakeRunner(editor_version='not a version')):
            assert get_editor_version(codium) is None

    def test_missing_binary_returns_none(self, codium):
        with patch.object(mod.subprocess, 'run', side_effect=FileNotFoundError):
            assert get_editor_version(codium) is None

    def test_timeout_returns_none(self, codium):
        with patch.object(mod.subprocess, 'run',
                          side_effect=subprocess.TimeoutExpired('codium', 10)):
            assert get_editor_version(codium) is None
