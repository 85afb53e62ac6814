# -*- coding: utf-8 -*-
"""
Funciones utilitarias para htmlsemdiff.
"""
from html import unescape
from xml.sax.saxutils import escape


def encode_text(text):
    """Encode ``&``, ``<`` and ``>`` (and nothing else) as entities."""
    if not text:
        return text
    return escape(text)


def decode_entities(text):
    """Decode every HTML character reference in ``text``."""
    if not text:
        return text
    return unescape(text)


def wrap_change(tag, text, css_class):
    """
    Build an ``<ins>``/``<del>`` span around already-encoded text.

    The class attribute is single-quoted so the markers are byte-stable no
    matter how the surrounding document is serialized.
    """
    return u"<%s class='%s'>%s</%s>" % (tag, css_class, text, tag)


def starts_alnum(text):
    return bool(text) and text[0].isalnum()


def ends_alnum(text):
    return bool(text) and text[-1].isalnum()


def wrap_fragment(html, wrapper_element, wrapper_class=None):
    """Place a rendered fragment inside ``<wrapper_element class="...">``."""
    if wrapper_class is None:
        attrs = u''
    else:
        attrs = u' class="%s"' % encode_text(wrapper_class).replace(u'"', u'&quot;')
    return u'<%s%s>%s</%s>' % (wrapper_element, attrs, html, wrapper_element)
