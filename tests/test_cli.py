# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the treeconfig command line."""

import json

import pytest

from genro_treeconfig.cli import main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / 'app.json'
    assert main(['create', str(path)]) == 0
    return path


class TestCli:
    """Tests for cli.main."""

    def test_create(self, config_file):
        """Test create writes an empty configuration."""
        assert config_file.read_text() == 'null\n'

    def test_set_json_values(self, config_file):
        """Test values are parsed as JSON."""
        assert main(['set', str(config_file), 'server.ports', '[80, 443]']) == 0
        assert main(['set', str(config_file), 'server.debug', 'true']) == 0
        data = json.loads(config_file.read_text())
        assert data == {'server': {'ports': [80, 443], 'debug': True}}

    def test_set_plain_text(self, config_file):
        """Test invalid JSON is stored as a string."""
        assert main(['set', str(config_file), 'server.host', 'localhost']) == 0
        assert json.loads(config_file.read_text()) == {'server': {'host': 'localhost'}}

    def test_set_compact(self, config_file):
        """Test --indent 0 saves the compact form."""
        main(['set', str(config_file), 'a', '1', '--indent', '0'])
        assert config_file.read_text() == '{"a":1}\n'

    def test_get(self, config_file, capsys):
        """Test get prints the serialized node."""
        main(['set', str(config_file), 'server.ports', '[80, 443]'])
        capsys.readouterr()
        assert main(['get', str(config_file), 'server.ports.1']) == 0
        assert capsys.readouterr().out == '443\n'

    def test_get_whole_content(self, config_file, capsys):
        """Test get without a path prints everything."""
        main(['set', str(config_file), 'a', '"x"'])
        capsys.readouterr()
        assert main(['get', str(config_file), '--indent', '0']) == 0
        assert capsys.readouterr().out == '{"a":"x"}\n'

    def test_get_missing_path_prints_null(self, config_file, capsys):
        """Test unresolved paths print null."""
        assert main(['get', str(config_file), 'a.b.c']) == 0
        assert capsys.readouterr().out == 'null\n'

    def test_missing_file_fails(self, tmp_path, capsys):
        """Test library errors give exit status 1."""
        assert main(['get', str(tmp_path / 'missing.json'), 'a']) == 1
        assert 'error:' in capsys.readouterr().err

    def test_index_out_of_range_fails(self, config_file, capsys):
        """Test a bounds violation is reported."""
        main(['set', str(config_file), '', '[1, 2]'])
        assert main(['set', str(config_file), '5', '0']) == 1
        assert 'out of range' in capsys.readouterr().err
        assert json.loads(config_file.read_text()) == [1, 2]

    def test_negative_indent_rejected(self, config_file):
        """Test argparse rejects a negative indent."""
        with pytest.raises(SystemExit):
            main(['get', str(config_file), '--indent', '-1'])

    def test_os_error_fails(self, tmp_path, capsys):
        """Test file system errors give exit status 1."""
        blocker = tmp_path / 'blocker'
        blocker.write_text('x')
        assert main(['create', str(blocker / 'app.json')]) == 1
        assert 'error:' in capsys.readouterr().err
