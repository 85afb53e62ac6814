# -*- coding: utf-8 -*-
"""
Replays an alignment against the new document's token stream.

The alignment only covers meaningful tokens. This module walks it together
with the full new token stream (whitespace included) and the old meaningful
tokens, and writes annotated text back into the leaves of the new document.
"""
import logging

from .aligner import EQUAL, INSERT, DELETE
from .config import DiffConfig
from .parser import MARKUP
from .tokenizer import is_whitespace
from .utils import encode_text, wrap_change, starts_alnum, ends_alnum

logger = logging.getLogger(__name__)


class LeafBuffers(object):
    """Rewritten text per leaf, keyed by the leaf's index in the token list."""

    def __init__(self):
        self._parts = {}

    def append(self, leaf, text):
        self._parts.setdefault(leaf, []).append(text)

    def is_empty(self, leaf):
        return not any(self._parts.get(leaf, ()))

    def last_char(self, leaf):
        for part in reversed(self._parts.get(leaf, ())):
            if part:
                return part[-1]
        return u''

    def flush(self, events):
        """Replace each buffered leaf of ``events`` with a Markup token."""
        for leaf, parts in self._parts.items():
            events[leaf] = {'type': MARKUP, 'data': u''.join(parts)}
        return events


def anchor_deletion(buffers, leaf, deleted, next_text, config):
    """
    Append a deletion span for ``deleted`` to the buffer of ``leaf``.

    Spacing heuristics: separate the span from preceding non-space content;
    on an empty buffer, lead with a space when the deleted text starts with a
    letter or digit (the leaf usually follows an inline element); trail with a
    space when the deleted text and the next token would otherwise glue two
    words together.
    """
    last = buffers.last_char(leaf)
    if last and not last.isspace():
        buffers.append(leaf, u' ')
    elif buffers.is_empty(leaf) and starts_alnum(deleted):
        buffers.append(leaf, u' ')
    buffers.append(leaf, wrap_change('del', encode_text(deleted), config.del_class))
    if ends_alnum(deleted) and starts_alnum(next_text):
        buffers.append(leaf, u' ')


def apply_alignment(events, ops, new_tokens, old_meaningful, config=None):
    """
    Rewrite the leaves of ``events`` (the new document) according to ``ops``.

    ``new_tokens`` is the full token stream of ``events``, ``old_meaningful``
    the old document's meaningful tokens. Returns ``events``, modified in
    place.
    """
    config = config or DiffConfig()
    buffers = LeafBuffers()
    n_ops = len(ops)
    n_new = len(new_tokens)
    op_idx = old_idx = new_idx = 0
    last_leaf = None

    while op_idx < n_ops:
        op = ops[op_idx]

        if op == DELETE:
            deleted = []
            while op_idx < n_ops and ops[op_idx] == DELETE:
                deleted.append(old_meaningful[old_idx].text)
                old_idx += 1
                op_idx += 1
            if new_idx < n_new:
                anchor = new_tokens[new_idx].leaf
                next_text = new_tokens[new_idx].text
            else:
                anchor = last_leaf
                if anchor is None and new_tokens:
                    anchor = new_tokens[-1].leaf
                next_text = None
            if anchor is None:
                logger.debug('no leaf to anchor deletion of %d tokens, dropped', len(deleted))
                continue
            anchor_deletion(buffers, anchor, u' '.join(deleted), next_text, config)
            continue

        while new_idx < n_new and is_whitespace(new_tokens[new_idx].text):
            token = new_tokens[new_idx]
            buffers.append(token.leaf, encode_text(token.text))
            new_idx += 1

        if new_idx >= n_new:
            op_idx += 1
            continue

        current = new_tokens[new_idx]
        last_leaf = current.leaf

        if op == EQUAL:
            buffers.append(current.leaf, encode_text(current.text))
            old_idx += 1
            op_idx += 1
            new_idx += 1
            continue

        # INSERT: grow the span while the next inserted token sits in the
        # same leaf, taking the whitespace between them along.
        inserted = [current.text]
        op_idx += 1
        new_idx += 1
        while new_idx < n_new and op_idx < n_ops and ops[op_idx] == INSERT:
            look = new_idx
            while (look < n_new and new_tokens[look].leaf == current.leaf
                   and is_whitespace(new_tokens[look].text)):
                look += 1
            if look >= n_new or new_tokens[look].leaf != current.leaf:
                break
            inserted.extend(t.text for t in new_tokens[new_idx:look + 1])
            new_idx = look + 1
            op_idx += 1
        buffers.append(current.leaf, wrap_change('ins', encode_text(u''.join(inserted)),
                                                 config.ins_class))

    while new_idx < n_new:
        token = new_tokens[new_idx]
        buffers.append(token.leaf, encode_text(token.text))
        new_idx += 1

    return buffers.flush(events)
