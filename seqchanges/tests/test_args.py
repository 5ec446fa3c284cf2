import json
import logging
import os
import sys

import pytest

from traitlets import Enum

from seqchanges.args import ConfigBackedParser
from seqchanges.config import (
    entrypoint_configurables, Global, build_config, config_path,
    load_disk_config, print_config,
)
from seqchanges.log import logger
from seqchanges import seqdiffapp


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)

@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config, reset_log_level):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'
    assert logger.level == logging.WARN

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert logger.level == logging.ERROR


def test_config_parser_unknown_entrypoint():
    # Parsers without a configurable still work, with plain defaults
    parser = ConfigBackedParser('not-configured')
    parser.add_argument('--flag', default='x')
    assert parser.parse_args([]).flag == 'x'


def test_diff_args_defaults(reset_log_level):
    arguments = seqdiffapp._build_arg_parser().parse_args(['a.txt', 'b.txt'])
    assert arguments.base == 'a.txt'
    assert arguments.remote == 'b.txt'
    assert arguments.unit == 'line'
    assert arguments.reduced is True
    assert arguments.use_color is True
    assert arguments.strings is False
    assert arguments.out is None
    assert arguments.log_level == 'INFO'


def test_diff_args_flags(reset_log_level):
    arguments = seqdiffapp._build_arg_parser().parse_args(
        ['--unit', 'char', '--no-reduce', '--no-color', 'a.txt', 'b.txt'])
    assert arguments.unit == 'char'
    assert arguments.reduced is False
    assert arguments.use_color is False


def test_diff_args_invalid_unit(reset_log_level):
    with pytest.raises(SystemExit):
        seqdiffapp._build_arg_parser().parse_args(['--unit', 'word', 'a', 'b'])


def test_build_config_defaults():
    assert build_config('seqchanges-diff') == {
        'log_level': 'INFO',
        'reduced': True,
        'unit': 'line',
        'use_color': True,
    }
    assert build_config('seqchanges-show') == {
        'log_level': 'INFO',
        'use_color': True,
    }


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('seqchanges-merge')


def test_config_path(tmpdir, monkeypatch, isolated_config):
    with tmpdir.as_cwd():
        path = config_path()
    assert os.path.samefile(path[0], str(tmpdir))
    assert path[1] == str(isolated_config.join('.seqchanges'))
    assert len(path) == 2

    monkeypatch.setenv('SEQCHANGES_CONFIG_DIR', str(tmpdir.join('env')))
    assert config_path()[-1] == str(tmpdir.join('env'))


def test_config_from_disk(tmpdir, reset_log_level):
    tmpdir.join('seqchanges_config.json').write_text(
        json.dumps({
            'SeqDiff': {
                'unit': 'char',
                'reduced': False,
            },
        }),
        encoding='utf-8'
    )

    parser = seqdiffapp._build_arg_parser()
    with tmpdir.as_cwd():
        arguments = parser.parse_args(['a.txt', 'b.txt'])
        assert build_config('seqchanges-show') == {
            'log_level': 'INFO',
            'use_color': True,
        }

    assert arguments.unit == 'char'
    assert arguments.reduced is False

    # Flags override config
    with tmpdir.as_cwd():
        arguments = parser.parse_args(['--unit', 'line', 'a.txt', 'b.txt'])
    assert arguments.unit == 'line'


def test_config_inherit(tmpdir):
    # Config for a base class applies to its entrypoint subclasses
    tmpdir.join('seqchanges_config.json').write_text(
        json.dumps({
            'Global': {
                'log_level': 'ERROR',
            },
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        assert build_config('seqchanges-diff')['log_level'] == 'ERROR'
        assert build_config('seqchanges-show')['log_level'] == 'ERROR'


def test_config_priority(tmpdir, isolated_config, monkeypatch):
    env_dir = tmpdir.mkdir('env')
    env_dir.join('seqchanges_config.json').write_text(
        json.dumps({'SeqDiff': {'unit': 'char', 'reduced': False, 'use_color': False}}),
        encoding='utf-8'
    )
    monkeypatch.setenv('SEQCHANGES_CONFIG_DIR', str(env_dir))

    user_dir = isolated_config.mkdir('.seqchanges')
    user_dir.join('seqchanges_config.json').write_text(
        json.dumps({'SeqDiff': {'unit': 'line', 'reduced': True}}),
        encoding='utf-8'
    )

    cwd = tmpdir.mkdir('cwd')
    cwd.join('seqchanges_config.json').write_text(
        json.dumps({'SeqDiff': {'unit': 'char'}}),
        encoding='utf-8'
    )

    with cwd.as_cwd():
        config = build_config('seqchanges-diff')
    assert config['unit'] == 'char'
    assert config['reduced'] is True
    assert config['use_color'] is False


def test_config_help_action(capsys, reset_log_level):
    with pytest.raises(SystemExit) as e:
        seqdiffapp._build_arg_parser().parse_args(['--config'])
    assert e.value.code == 1
    _, err = capsys.readouterr()
    assert 'SeqDiff:' in err
    assert 'unit: "line"' in err
    assert 'reduced: true' in err


def test_load_disk_config_merges_sections(tmpdir):
    low = tmpdir.mkdir('low')
    low.join('seqchanges_config.json').write_text(
        json.dumps({'SeqDiff': {'unit': 'char', 'reduced': False}, 'ignored': 1}),
        encoding='utf-8'
    )
    high = tmpdir.mkdir('high')
    high.join('seqchanges_config.json').write_text(
        json.dumps({'SeqDiff': {'unit': 'line'}, 'SeqShow': {'use_color': False}}),
        encoding='utf-8'
    )
    empty = tmpdir.mkdir('empty')

    sections = load_disk_config([str(high), str(empty), str(low)])
    assert sections == {
        'SeqDiff': {'unit': 'line', 'reduced': False},
        'SeqShow': {'use_color': False},
    }
    assert load_disk_config([str(empty)]) == {}


def test_print_config(capsys):
    print_config(['seqchanges-show', 'seqchanges-diff'], sys.stdout)
    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        'SeqShow:',
        '  log_level: "INFO"',
        '  use_color: true',
        'SeqDiff:',
        '  log_level: "INFO"',
        '  reduced: true',
        '  unit: "line"',
        '  use_color: true',
    ]


def test_log_level_from_config_file(tmpdir, reset_log_level):
    tmpdir.join('seqchanges_config.json').write_text(
        json.dumps({'Global': {'log_level': 'ERROR'}}),
        encoding='utf-8'
    )
    parser = seqdiffapp._build_arg_parser()
    with tmpdir.as_cwd():
        arguments = parser.parse_args(['a.txt', 'b.txt'])
    assert arguments.log_level == 'ERROR'
    assert logger.level == logging.ERROR

    # The command line still wins
    with tmpdir.as_cwd():
        parser.parse_args(['--log-level', 'DEBUG', 'a.txt', 'b.txt'])
    assert logger.level == logging.DEBUG
