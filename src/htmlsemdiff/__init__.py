# -*- coding: utf-8 -*-
"""
    htmlsemdiff
    ~~~~~~~~~~~

    Word-level diffs of HTML fragments.  The markup of the newer revision is
    kept as is; removed words are wrapped in ``<del>`` and added words in
    ``<ins>``.  Examples:

    >>> from htmlsemdiff import diff

    >>> print(diff('<p>The cat sat.</p>', '<p>The dog sat.</p>'))
    <p>The <del class='diff-del'>cat</del> <ins class='diff-ins'>dog</ins> sat.</p>

    >>> print(diff('<p>Hello world</p>', '<p>Hello</p>'))
    <p>Hello <del class='diff-del'>world</del></p>

    >>> print(diff('<p>Hello world</p>', '<p>Hello <b>big</b> world</p>'))
    <p>Hello <b><ins class='diff-ins'>big</ins></b> world</p>

    >>> print(diff('Fish &amp; chips', ''))
    <del class='diff-del'>Fish &amp; chips</del>
"""
from .aligner import AlignmentTooLarge, align
from .config import DiffConfig
from .differ import SemanticDiffer, diff, diff_token_stream
from .parser import parse_events, parse_html, render_events

__all__ = [
    'diff',
    'diff_token_stream',
    'SemanticDiffer',
    'DiffConfig',
    'AlignmentTooLarge',
    'align',
    'parse_html',
    'parse_events',
    'render_events',
]
