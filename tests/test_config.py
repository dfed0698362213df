"""Tests for option parsing and validation."""

import pytest

from placegen.core.config import (
    MEGABYTE,
    GenerationOptions,
    OutputFormat,
    parse_dimensions,
    parse_target_size,
)
from placegen.core.errors import InvalidOptionsError


@pytest.mark.parametrize("value,expected", [
    ('jpeg', OutputFormat.JPEG),
    ('JPG', OutputFormat.JPEG),
    ('png', OutputFormat.PNG),
    (OutputFormat.PNG, OutputFormat.PNG),
])
def test_output_format_parse(value, expected):
    assert OutputFormat.parse(value) is expected


def test_output_format_rejects_unknown():
    with pytest.raises(InvalidOptionsError):
        OutputFormat.parse('gif')


def test_only_jpeg_supports_metadata():
    assert OutputFormat.JPEG.supports_metadata
    assert not OutputFormat.PNG.supports_metadata
    assert OutputFormat.JPEG.extension == 'jpg'
    assert OutputFormat.PNG.extension == 'png'


@pytest.mark.parametrize("value,expected", [
    (None, 0),
    ('auto', 0),
    ('AUTO', 0),
    ('1MB', MEGABYTE),
    ('20mb', 20 * MEGABYTE),
    ('123456', 123456),
    (4096, 4096),
])
def test_parse_target_size(value, expected):
    assert parse_target_size(value) == expected


@pytest.mark.parametrize("value", ['3MB', 'big', '-5', -1, '²', '٥٠'])
def test_parse_target_size_rejects(value):
    with pytest.raises(InvalidOptionsError):
        parse_target_size(value)


def test_parse_dimensions():
    assert parse_dimensions('800x600') == (800, 600)
    assert parse_dimensions(' 1024 X 768 ') == (1024, 768)
    with pytest.raises(InvalidOptionsError):
        parse_dimensions('800by600')


def test_embeds_metadata_only_for_jpeg():
    assert GenerationOptions(format='jpeg', include_metadata=True).embeds_metadata
    assert not GenerationOptions(format='png', include_metadata=True).embeds_metadata
    assert not GenerationOptions(format='jpeg', include_metadata=False).embeds_metadata


@pytest.mark.parametrize("overrides", [
    {'count': 0},
    {'count': -3},
    {'random_size': False, 'width': 0},
    {'random_size': False, 'height': 20000},
    {'target_size': -1},
    {'background': 'not-a-colour'},
])
def test_validate_rejects(overrides):
    with pytest.raises(InvalidOptionsError):
        GenerationOptions(**overrides).validate()


def test_validate_accepts_defaults_and_colours():
    GenerationOptions().validate()
    GenerationOptions(background='#aabbcc').validate()
    GenerationOptions(background='teal', random_size=False, width=1, height=1).validate()
