# -*- coding: utf-8 -*-
"""
Clases principales para realizar diffs semánticos de HTML.
"""
import logging

from .aligner import align
from .config import DiffConfig
from .parser import parse_events, render_events
from .reconstruction import apply_alignment
from .tokenizer import tokenize_events, meaningful_tokens
from .utils import encode_text, decode_entities, wrap_change, wrap_fragment

logger = logging.getLogger(__name__)


def markup_deleted(html, config=None):
    """The whole of ``html``, decoded then re-encoded, in one deletion span."""
    config = config or DiffConfig()
    return wrap_change('del', encode_text(decode_entities(html)), config.del_class)


def markup_inserted(html, config=None):
    """The whole of ``html``, decoded then re-encoded, in one insertion span."""
    config = config or DiffConfig()
    return wrap_change('ins', encode_text(decode_entities(html)), config.ins_class)


def diff_token_stream(old_events, new_events, config=None):
    """Diff two token lists and return the rewritten new one."""
    differ = SemanticDiffer(old_events, new_events, config=config)
    return differ.get_diff_events()


def diff(old, new, config=None, wrapper_element=None, wrapper_class=None):
    """
    Renders the word-level diff between two HTML fragments.

    The markup of ``new`` is kept; removed text is wrapped in ``<del>`` and
    added text in ``<ins>``.
    """
    config = config or DiffConfig()
    if not old and not new:
        rv = u''
    elif not new:
        rv = markup_deleted(old, config)
    elif not old:
        rv = markup_inserted(new, config)
    else:
        differ = SemanticDiffer(parse_events(old), parse_events(new), config=config)
        rv = differ.render()
    if wrapper_element is not None:
        rv = wrap_fragment(rv, wrapper_element, wrapper_class)
    return rv


class SemanticDiffer(object):
    """
    Diffs the text of two html5lib token lists (see `parse_events`).

    Only text is compared; the new document's elements and attributes are
    kept as they are and its text nodes are rewritten with ``<ins>``/``<del>``
    markers. The token lists are copied, the caller's lists are not modified.
    """

    def __init__(self, old_events, new_events, config=None):
        self.config = config or DiffConfig()
        self._old_events = list(old_events)
        self._new_events = list(new_events)
        self._result = None

    def get_diff_events(self):
        if self._result is None:
            self._result = self._process()
        return self._result

    def render(self):
        return render_events(self.get_diff_events(), self.config)

    def _process(self):
        old_tokens = tokenize_events(self._old_events, self.config)
        new_tokens = tokenize_events(self._new_events, self.config)
        old_meaningful = meaningful_tokens(old_tokens)
        new_meaningful = meaningful_tokens(new_tokens)
        logger.debug('diffing %d old / %d new meaningful tokens',
                     len(old_meaningful), len(new_meaningful))

        ops = align([t.text for t in old_meaningful],
                    [t.text for t in new_meaningful],
                    max_cells=self.config.max_alignment_cells)
        return apply_alignment(list(self._new_events), ops, new_tokens,
                               old_meaningful, self.config)
