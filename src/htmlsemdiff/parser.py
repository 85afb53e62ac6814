# -*- coding: utf-8 -*-
"""
Funciones de parsing y serialización HTML para htmlsemdiff.

Documents are handled as flat lists of html5lib tree-walker tokens. Each DOM
text node is exactly one ``Characters`` token, so a leaf is addressed by its
index in the list and can be swapped out without touching the rest.
"""
import html5lib
from html5lib.filters.base import Filter
from html5lib.filters.optionaltags import Filter as OptionalTagFilter
from html5lib.serializer import HTMLSerializer

from .config import DiffConfig

# Token type for pre-rendered markup. Only DiffSerializer understands it.
MARKUP = 'Markup'

_TEXT_TYPES = ('Characters', 'SpaceCharacters')


def parse_html(html):
    """Parse an HTML fragment into an ElementTree fragment root."""
    builder = html5lib.getTreeBuilder('etree')
    parser = html5lib.HTMLParser(tree=builder, namespaceHTMLElements=False)
    return parser.parseFragment(html or u'')


class TextNodeFilter(Filter):
    """
    Coalesce text tokens back into one ``Characters`` token per text node.

    The tree walker splits leading/trailing whitespace of a node into separate
    ``SpaceCharacters`` tokens. Two text tokens are only ever adjacent when
    they come from the same node, so joining every adjacent run restores the
    node boundaries.
    """

    def __iter__(self):
        pending = []
        for token in Filter.__iter__(self):
            if token['type'] in _TEXT_TYPES:
                pending.append(token['data'])
                continue
            if pending:
                yield {'type': 'Characters', 'data': u''.join(pending)}
                pending = []
            yield token
        if pending:
            yield {'type': 'Characters', 'data': u''.join(pending)}


def parse_events(html):
    """Parse an HTML fragment into a list of tokens, one per text node."""
    walker = html5lib.getTreeWalker('etree')
    return list(TextNodeFilter(walker(parse_html(html))))


class DiffSerializer(HTMLSerializer):
    """
    HTMLSerializer that emits ``Markup`` tokens verbatim.

    Everything between two markup tokens is handed to the stock serializer in
    one piece. Markup tokens replace text nodes outside of raw-text elements
    (script/style), so no serializer state is lost at those cut points.
    Optional tags are decided once over the whole stream: whether an end tag
    can go depends on the token after it, which a chunk cannot see.
    """

    def serialize(self, treewalker, encoding=None):
        self.encoding = encoding
        omit_optional_tags = self.omit_optional_tags
        if omit_optional_tags:
            treewalker = OptionalTagFilter(treewalker)
        self.omit_optional_tags = False
        try:
            chunk = []
            for token in treewalker:
                if token['type'] != MARKUP:
                    chunk.append(token)
                    continue
                if chunk:
                    for part in HTMLSerializer.serialize(self, chunk, encoding):
                        yield part
                    chunk = []
                yield self.encode(token['data'])
            if chunk:
                for part in HTMLSerializer.serialize(self, chunk, encoding):
                    yield part
        finally:
            self.omit_optional_tags = omit_optional_tags


def render_events(events, config=None):
    """Serialize a token list produced by `parse_events` (possibly rewritten)."""
    config = config or DiffConfig()
    serializer = DiffSerializer(**config.serializer_options())
    return serializer.render(iter(events))
