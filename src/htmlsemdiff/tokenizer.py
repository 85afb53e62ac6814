# -*- coding: utf-8 -*-
"""
Tokenization of document text into comparable units.

A token is a word run, a single punctuation character or a whitespace run,
tagged with the index of the text node (leaf) it came from.
"""
from collections import namedtuple

from .config import DiffConfig, _token_split_re

Token = namedtuple('Token', ['text', 'leaf'])


def text_split(text, config=None):
    """
    Split text into word runs, single punctuation characters and whitespace runs.

    >>> text_split(u'Hello, world!')
    ['Hello', ',', ' ', 'world', '!']
    """
    rx = getattr(config, 'tokenize_regex', _token_split_re)
    return [p for p in rx.split(text) if p != u'']


def is_whitespace(text):
    return text.isspace()


def tokenize_events(events, config=None):
    """
    Tokenize every rendered text node of a token list, in document order.

    Text whose nearest enclosing element is a non-rendering one (script,
    style) is skipped.
    """
    config = config or DiffConfig()
    skip = config.skip_text_tags
    stack = []
    tokens = []
    for idx, event in enumerate(events):
        etype = event['type']
        if etype == 'StartTag':
            stack.append(event['name'])
        elif etype == 'EndTag':
            if stack:
                stack.pop()
        elif etype == 'Characters':
            if stack and stack[-1] in skip:
                continue
            for part in text_split(event['data'], config):
                tokens.append(Token(part, idx))
    return tokens


def meaningful_tokens(tokens):
    """Tokens that take part in alignment (anything but pure whitespace)."""
    return [t for t in tokens if not is_whitespace(t.text)]
