"""Test the tokens helpers and the layers splitters."""

import pytest

from shorthands.layers import (
    AnimationLayer, BackgroundLayer, align_layers, canonical_layer,
    split_layers)
from shorthands.properties import (
    BACKGROUND_IMAGE_FUNCTIONS, MASK_IMAGE_FUNCTIONS)
from shorthands.tokens import (
    InvalidToken, InvalidValues, get_keyword, get_single_keyword, is_color,
    is_image, is_length, is_slash, is_time, normalize_value, parse_value,
    serialize_tokens, split_on_comma)

from .testing_utils import assert_no_logs


@pytest.mark.parametrize('error', (
    InvalidToken, InvalidValues, ValueError))
def test_parse_value_error(error):
    with pytest.raises(error):
        parse_value('url(a.png) )')


@assert_no_logs
def test_parse_value():
    tokens = parse_value('  url(a.png) /* comment */ 10px/20%  ')
    assert [token.type for token in tokens] == [
        'url', 'dimension', 'literal', 'percentage']
    assert serialize_tokens(tokens) == 'url(a.png) 10px / 20%'
    assert is_slash(tokens[2])


@assert_no_logs
def test_parse_value_function_atom():
    token, = parse_value('linear-gradient(red, rgb(0, 0, 255))')
    assert token.type == 'function'
    assert token.serialize() == 'linear-gradient(red, rgb(0, 0, 255))'


@assert_no_logs
def test_split_on_comma():
    layers = split_on_comma(parse_value('a b, calc(1px, 2px) c,d'))
    assert [serialize_tokens(layer) for layer in layers] == [
        'a b', 'calc(1px, 2px) c', 'd']


@assert_no_logs
@pytest.mark.parametrize('value, keyword, single', (
    ('Repeat', 'repeat', 'repeat'),
    ('repeat space', 'repeat', None),
    ('10px', None, None),
    ('"none"', None, None),
))
def test_keywords(value, keyword, single):
    tokens = parse_value(value)
    assert get_keyword(tokens[0]) == keyword
    assert get_single_keyword(tokens) == single


@assert_no_logs
@pytest.mark.parametrize('value, length, length_percentage, positive', (
    ('10px', True, True, True),
    ('2.5EM', True, True, True),
    ('1rem', True, True, True),
    ('3cqw', True, True, True),
    ('0', True, True, True),
    ('-1px', True, True, False),
    ('5', False, False, False),
    ('10%', False, True, False),
    ('1s', False, False, False),
    ('calc(1px + 2%)', True, True, True),
    ('auto', False, False, False),
))
def test_is_length(value, length, length_percentage, positive):
    token, = parse_value(value)
    assert is_length(token) == length
    assert is_length(token, percentage=True) == length_percentage
    assert is_length(token, negative=False) == positive


@assert_no_logs
@pytest.mark.parametrize('value, result', (
    ('1s', True),
    ('200MS', True),
    ('-0.5s', True),
    ('1px', False),
    ('1', False),
    ('ease', False),
))
def test_is_time(value, result):
    token, = parse_value(value)
    assert is_time(token) == result


@assert_no_logs
@pytest.mark.parametrize('value, result', (
    ('red', True),
    ('transparent', True),
    ('currentcolor', True),
    ('#fff', True),
    ('rgb(0 0 0 / 50%)', True),
    ('hsl(120deg, 100%, 50%)', True),
    ('left', False),
    ('none', False),
    ('1px', False),
    ('url(a.png)', False),
))
def test_is_color(value, result):
    token, = parse_value(value)
    assert is_color(token) == result


@assert_no_logs
@pytest.mark.parametrize('value, background, mask', (
    ('url(a.png)', True, True),
    ('url("a.png")', True, True),
    ('linear-gradient(red, blue)', True, True),
    ('repeating-conic-gradient(red, blue)', True, True),
    ('image-set("a.png" 1x, "b.png" 2x)', True, True),
    ('paint(worklet)', False, True),
    ('none', False, False),
    ('rgb(0, 0, 0)', False, False),
))
def test_is_image(value, background, mask):
    token, = parse_value(value)
    assert is_image(token, BACKGROUND_IMAGE_FUNCTIONS) == background
    assert is_image(token, MASK_IMAGE_FUNCTIONS) == mask


@assert_no_logs
@pytest.mark.parametrize('value, result', (
    ('url(a)  no-repeat', 'url(a) no-repeat'),
    ('url(a) ,url(b)', 'url(a), url(b)'),
    ('  1s  /* delay */ 2s ', '1s 2s'),
    ('rgb(0,  0, 0)', 'rgb(0,  0, 0)'),
))
def test_normalize_value(value, result):
    assert normalize_value(value) == result


@assert_no_logs
@pytest.mark.parametrize('text, layers', (
    ('', ()),
    ('   ', ()),
    ('none', ('none',)),
    ('url(a.png), url(b.png)', ('url(a.png)', 'url(b.png)')),
    ('linear-gradient(red, blue) , none', (
        'linear-gradient(red, blue)', 'none')),
    ('image-set("a.png" 1x, "b.png" 2x)', (
        'image-set("a.png" 1x, "b.png" 2x)',)),
    ('"a, b", c', ('"a, b"', 'c')),
    ("'it\\'s, here', c", ("'it\\'s, here'", 'c')),
    ('[a, b] c, d', ('[a, b] c', 'd')),
))
def test_split_layers(text, layers):
    assert split_layers(text) == layers


@assert_no_logs
@pytest.mark.parametrize('text', (
    'a, , b',
    'a,',
    ', a',
))
def test_split_layers_empty(text):
    with pytest.raises(InvalidToken):
        split_layers(text)


@assert_no_logs
def test_align_layers():
    layers = align_layers('background', {
        'background-image': 'url(a.png), url(b.png), none',
        'background-repeat': 'no-repeat',
        'background-color': 'red',
    }, exclude=('color',))
    assert layers == (
        BackgroundLayer(image='url(a.png)', repeat='no-repeat'),
        BackgroundLayer(image='url(b.png)'),
        BackgroundLayer(image='none'),
    )


@assert_no_logs
def test_align_layers_longest():
    layers = align_layers('animation', {
        'animation-name': 'spin',
        'animation-duration': '1s, 2s',
    })
    assert layers == (
        AnimationLayer(name='spin', duration='1s'),
        AnimationLayer(duration='2s'),
    )


@assert_no_logs
def test_align_layers_empty():
    assert align_layers('transition', {}) == ()


@assert_no_logs
@pytest.mark.parametrize('slot, layer, result', (
    ('position', '0% 0%', '0% 0%'),
    ('position', '0 0', '0% 0%'),
    ('position', 'left top', '0% 0%'),
    ('position', 'Top Left', '0% 0%'),
    ('position', 'center', '50% 50%'),
    ('position', 'bottom', '50% 100%'),
    ('position', '10px', '10px 50%'),
    ('position', 'right 2em', '100% 2em'),
    ('size', 'auto auto', 'auto'),
    ('size', 'Auto', 'auto'),
    ('size', '50% auto', '50%'),
    ('size', 'auto 50%', 'auto 50%'),
    ('size', 'cover', 'cover'),
    ('repeat', 'repeat repeat', 'repeat repeat'),
))
def test_canonical_layer(slot, layer, result):
    assert canonical_layer(slot, layer) == result
