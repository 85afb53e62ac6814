# -*- coding: utf-8 -*-
"""
Configuración y constantes para htmlsemdiff.
"""
import re

# Expresiones regulares (exportadas para uso en otros módulos)
# Whitespace runs, or a single non-word character. Word runs are what's left.
_token_split_re = re.compile(r'(\s+|[^\w\s])', re.U)

INS_CLASS = 'diff-ins'
DEL_CLASS = 'diff-del'

# Text under these elements is never rendered as content, so it is not diffed.
NON_RENDERING_TAGS = frozenset(['script', 'style'])


class DiffConfig(object):
    """
    Runtime configuration for diff rendering.

    Plain object with class-level defaults: subclass it, or instantiate and
    override attributes.
    """

    # Change markers
    ins_class = INS_CLASS
    del_class = DEL_CLASS

    # Tokenization
    tokenize_regex = _token_split_re
    skip_text_tags = NON_RENDERING_TAGS

    # html5lib serializer options. Keeping optional tags and quoting every
    # attribute makes an unchanged document serialize back to its own markup.
    omit_optional_tags = False
    quote_attr_values = 'always'

    # Upper bound for len(old_tokens) * len(new_tokens). The alignment table is
    # O(n*m) in memory; None disables the check.
    max_alignment_cells = None

    def serializer_options(self):
        return {
            'omit_optional_tags': self.omit_optional_tags,
            'quote_attr_values': self.quote_attr_values,
        }
