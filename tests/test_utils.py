"""Tests for formatting, hashing and logging helpers."""

import json
import logging

import yaml

from placegen.core.config import OutputFormat
from placegen.core.models import GeneratedImage
from placegen.utils.formatter import OutputFormatter, format_duration, format_file_size
from placegen.utils.hasher import ContentHasher
from placegen.utils.logger import ErrorCollector, ProgressLogger, setup_logger


def test_format_file_size():
    assert format_file_size(0) == "0 B"
    assert format_file_size(512) == "512 B"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(5 * 1024 * 1024) == "5.0 MB"


def test_format_duration():
    assert format_duration(1.5) == "1.5s"
    assert format_duration(125) == "2m 5s"
    assert format_duration(3725) == "1h 2m 5s"


def test_output_formatter_formats():
    data = {'format': OutputFormat.JPEG, 'count': 2, 'tags': ['a', 'b']}

    assert json.loads(OutputFormatter('json').format_data(data)) == {
        'format': 'jpeg', 'count': 2, 'tags': ['a', 'b']
    }
    assert yaml.safe_load(OutputFormatter('yaml').format_data(data))['format'] == 'jpeg'

    table = OutputFormatter('table').format_data([{'name': 'x', 'metadata': None}])
    assert 'name' in table and '-' in table

    assert 'count: 2' in OutputFormatter('plain').format_data(data)


def test_hasher_manifest(tmp_path):
    items = [
        GeneratedImage(index=1, short_id='aaaaaa', width=1, height=1, format=OutputFormat.PNG, data=b"abc"),
    ]
    hasher = ContentHasher()
    path = hasher.save_manifest(items, tmp_path / 'manifest.json')
    manifest = json.loads(path.read_text())

    entry = manifest['files']['image_1_aaaaaa_1x1.png']
    assert entry['size'] == 3
    assert entry['sha256'] == 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
    assert hasher.verify(b"abc", entry['sha256'].upper())


def test_error_collector_groups_errors():
    collector = ErrorCollector()
    collector.add_error('image 1', ValueError('bad'))
    collector.add_error('image 2', OSError('disk'))

    assert collector.has_errors()
    assert collector.get_error_count() == 2
    assert [e['type'] for e in collector.get_errors()] == ['ValueError', 'OSError']
    collector.log_summary()
    collector.clear()
    assert not collector.has_errors()


def test_setup_logger_writes_file(tmp_path):
    log_path = tmp_path / 'logs' / 'run.log'
    logger = setup_logger(verbose=True, log_file=str(log_path))

    ProgressLogger(4, "Testing").update(4)
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert 'Testing: 4/4' in log_path.read_text(encoding='utf-8')
