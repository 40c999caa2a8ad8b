"""
    Tests for the shorthand expanders
    ---------------------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


import logging

import pytest

from cssvalues.shorthands import (
    EXPANDERS, MalformedFontShorthand, expand_shorthand, parse_border,
    parse_box_values, process_background, process_font, process_list_style)

from . import assert_edges


@pytest.mark.parametrize(('box', 'expected_edges'), [
    ('1px', ['1px', '1px', '1px', '1px']),
    ('1px 2px', ['1px', '2px', '1px', '2px']),
    ('1px 2px 3px', ['1px', '2px', '3px', '2px']),
    ('1px 2px 3px 4px', ['1px', '2px', '3px', '4px']),
    ('auto 0', ['auto', '0', 'auto', '0']),
])
def test_box_values(box, expected_edges):
    result = parse_box_values(box, 'margin-', '')
    assert len(result) == 4
    assert_edges(result, 'margin-', '', expected_edges)


def test_box_values_keys():
    assert parse_box_values('solid', 'border-', '-style') == {
        'border-top-style': 'solid',
        'border-right-style': 'solid',
        'border-bottom-style': 'solid',
        'border-left-style': 'solid',
    }
    assert sorted(parse_box_values('1px')) == [
        'bottom', 'left', 'right', 'top']


def test_box_values_too_many():
    assert parse_box_values('1px 2px 3px 4px 5px', 'padding-', '') == {}


def test_border():
    result = parse_border('1px solid #ff0000')
    assert len(result) == 12
    assert_edges(result, 'border-', '-width', ['1px'] * 4)
    assert_edges(result, 'border-', '-style', ['solid'] * 4)
    assert_edges(result, 'border-', '-color', ['#ff0000'] * 4)


@pytest.mark.parametrize(('border', 'expected_width', 'expected_style',
                          'expected_color'), [
    ('thin dashed red', 'thin', 'dashed', 'red'),
    ('medium double rgb(0,0,255)', 'medium', 'double', 'rgb(0,0,255)'),
    ('2 groove Navy', '2', 'groove', 'Navy'),
    ('1px solid wibble', '1px', 'solid', None),
    ('dotted  0.5pt', '0.5pt', 'dotted', None),
    # 'inset' contains 'in', so it is read as a width
    ('inset black', 'inset', None, 'black'),
])
def test_border_classification(border, expected_width, expected_style,
                               expected_color):
    result = parse_border(border)
    assert_edges(result, 'border-', '-width', [expected_width] * 4)
    assert_edges(result, 'border-', '-style', [expected_style] * 4)
    assert_edges(result, 'border-', '-color', [expected_color] * 4)


@pytest.mark.parametrize(('border', 'expected_post'), [
    ('2px', '-width'),
    ('thick', '-width'),
    ('solid', '-style'),
    # A single value is never a color
    ('red', '-style'),
])
def test_border_single_value(border, expected_post):
    result = parse_border(border)
    assert len(result) == 4
    assert_edges(result, 'border-', expected_post, [border] * 4)


def test_border_empty():
    assert parse_border('') == {}
    assert parse_border('   ') == {}


def test_border_logs_ignored_values(caplog):
    with caplog.at_level(logging.DEBUG, logger='cssvalues'):
        parse_border('1px solid wibble')
    assert len(caplog.records) == 1
    assert 'wibble' in caplog.records[0].getMessage()


@pytest.mark.parametrize(('background', 'expected_rules'), [
    ('#fff', {'background-color': '#fff'}),
    ('url(a.png) no-repeat fixed', {
        'background-image': 'url(a.png)',
        'background-repeat': 'no-repeat',
        'background-attachment': 'fixed'}),
    ('RED url("b.png") Repeat-X Scroll', {
        'background-color': 'RED',
        'background-image': 'url("b.png")',
        'background-repeat': 'Repeat-X',
        'background-attachment': 'Scroll'}),
    ('center', {'background-position': 'center'}),
    ('rgb(1,2,3) wibble', {'background-color': 'rgb(1,2,3)'}),
    ('', {}),
])
def test_background(background, expected_rules):
    assert process_background(background) == expected_rules


@pytest.mark.parametrize(('background', 'expected_position'), [
    # Each position value goes in front of the previous ones,
    # so the stored order is the reverse of the source order.
    ('left top', 'top left'),
    ('10px 20%', '20% 10px'),
    ('#000 right 5 bottom', 'bottom 5 right'),
])
def test_background_position_order(background, expected_position):
    assert process_background(background)['background-position'] == (
        expected_position)


@pytest.mark.parametrize(('list_style', 'expected_rules'), [
    ('disc', {'list-style-type': 'disc'}),
    ('square inside url(dot.png)', {
        'list-style-type': 'square',
        'list-style-position': 'inside',
        'list-style-image': 'url(dot.png)'}),
    ('Upper-Roman OUTSIDE', {
        'list-style-type': 'Upper-Roman',
        'list-style-position': 'OUTSIDE'}),
    ('lower-greek decimal none', {'list-style-type': 'lower-greek'}),
    ('', {}),
])
def test_list_style(list_style, expected_rules):
    assert process_list_style(list_style) == expected_rules


@pytest.mark.parametrize(('font', 'expected_rules'), [
    ('12px Arial', {'font-size': '12px', 'font-family': 'Arial'}),
    ('12 Arial', {'font-size': '12', 'font-family': 'Arial'}),
    ('italic small-caps bold 12px/1.5 "Times New Roman", serif', {
        'font-style': 'italic',
        'font-variant': 'small-caps',
        'font-weight': 'bold',
        'font-size': '12px',
        'line-height': '1.5',
        'font-family': 'Times New Roman, serif'}),
    ('bold italic 16pt \'Georgia\'', {
        'font-weight': 'bold',
        'font-style': 'italic',
        'font-size': '16pt',
        'font-family': 'Georgia'}),
    ('Oblique SMALL-CAPS 1cm/2cm sans-serif', {
        'font-style': 'Oblique',
        'font-variant': 'SMALL-CAPS',
        'font-size': '1cm',
        'line-height': '2cm',
        'font-family': 'sans-serif'}),
    ('small-caps bold italic 9pt Courier', {
        'font-variant': 'small-caps',
        'font-weight': 'bold',
        'font-style': 'italic',
        'font-size': '9pt',
        'font-family': 'Courier'}),
    # No size: no size, line height or family
    ('normal 12px Arial', {}),
    ('bold large Arial', {'font-weight': 'bold'}),
    # At most three rounds of modifiers: the fourth 'bold' is not a size
    ('bold bold bold bold 12px Arial', {'font-weight': 'bold'}),
    ('italic bold italic bold 12px Arial', {
        'font-style': 'italic',
        'font-weight': 'bold',
        'font-size': '12px',
        'font-family': 'Arial'}),
    ('italic italic 12px Arial', {
        'font-style': 'italic',
        'font-size': '12px',
        'font-family': 'Arial'}),
    # Only the first part after the size is the line height
    ('12px/1.5/2 Arial', {
        'font-size': '12px',
        'line-height': '1.5',
        'font-family': 'Arial'}),
])
def test_font(font, expected_rules):
    assert process_font(font) == expected_rules


@pytest.mark.parametrize('font', [
    '',
    'Arial',
    'bold 12px',
    'italic bold',
])
def test_malformed_font(font):
    with pytest.raises(MalformedFontShorthand) as exc_info:
        process_font(font)
    assert exc_info.value.value == font
    assert repr(font) in str(exc_info.value)


def test_malformed_font_is_value_error():
    with pytest.raises(ValueError):
        expand_shorthand('font', 'bold')


def test_expanders():
    assert sorted(EXPANDERS) == [
        'background', 'border', 'border-bottom', 'border-color',
        'border-left', 'border-right', 'border-style', 'border-top',
        'border-width', 'font', 'list-style', 'margin', 'padding']


@pytest.mark.parametrize(('name', 'value', 'expected_rules'), [
    ('margin', '  1px   2px ', {
        'margin-top': '1px', 'margin-right': '2px',
        'margin-bottom': '1px', 'margin-left': '2px'}),
    ('padding', '0 1em 2em', {
        'padding-top': '0', 'padding-right': '1em',
        'padding-bottom': '2em', 'padding-left': '1em'}),
    ('BORDER-COLOR', 'red  blue', {
        'border-top-color': 'red', 'border-right-color': 'blue',
        'border-bottom-color': 'red', 'border-left-color': 'blue'}),
    ('border-width', '1px 2px 3px 4px', {
        'border-top-width': '1px', 'border-right-width': '2px',
        'border-bottom-width': '3px', 'border-left-width': '4px'}),
    ('border-left', '3px dotted #123', {
        'border-left-width': '3px', 'border-left-style': 'dotted',
        'border-left-color': '#123'}),
    ('list-style', ' circle ', {'list-style-type': 'circle'}),
    ('font', 'bold  10pt  Arial', {
        'font-weight': 'bold', 'font-size': '10pt', 'font-family': 'Arial'}),
    ('background', 'fixed', {'background-attachment': 'fixed'}),
    ('color', 'red', {}),
])
def test_expand_shorthand(name, value, expected_rules):
    assert expand_shorthand(name, value) == expected_rules


def test_expand_unknown_shorthand_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger='cssvalues'):
        assert expand_shorthand('transition', 'all 1s') == {}
    assert 'transition' in caplog.records[0].getMessage()
