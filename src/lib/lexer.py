"""
Custom Pygments lexer for markfolio sources

Highlights markdown that embeds !![label](type:value:extra)!! directives,
so content authors can show directive examples inside ```markfolio or
```mdui fenced blocks.

Token types:
- Punctuation: directive delimiters (!![, ](, :, )!!)
- String: directive label
- Name.Tag: directive type
- Name.Attribute: directive value
- Literal: directive extra segment
- Generic.Heading / Generic.Strong / Generic.Emph: markdown structure
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Literal,
    Comment,
    Generic,
)


class MarkfolioLexer(RegexLexer):
    """
    Lexer for markdown with inline UI directives

    Example:
        Press !![Save](toast:saved)!! to **store** it.

    Tokens:
        !![ → Punctuation
        Save → String
        toast → Name.Tag
        saved → Name.Attribute
        **store** → Generic.Strong
    """

    name = 'Markfolio'
    aliases = ['markfolio', 'mdui']
    filenames = ['*.mdui']

    tokens = {
        'root': [
            # HTML comments
            (r'<!--.*?-->', Comment),

            # Directives, with and without the extra segment
            (
                r'(!!\[)([^\]]+)(\]\()([^:)]+)(:)([^:)]+)(?:(:)([^)]+))?(\)!!)',
                bygroups(
                    Punctuation, String, Punctuation, Name.Tag, Punctuation,
                    Name.Attribute, Punctuation, Literal, Punctuation,
                ),
            ),

            # Headings
            (r'^#{1,6}[ \t].*$', Generic.Heading),

            # Fence markers and inline code
            (r'^```.*$', String.Backtick),
            (r'`[^`\n]+`', String.Backtick),

            # List markers and block quotes
            (r'^([ \t]*)([-*+]|\d+\.)([ \t])', bygroups(Text, Keyword, Text)),
            (r'^>.*$', Generic.Emph),

            # Strong and emphasis
            (r'\*\*[^*\n]+\*\*', Generic.Strong),
            (r'_[^_\n]+_', Generic.Emph),

            # Links and images
            (r'(!?\[)([^\]\n]*)(\]\()([^)\n]*)(\))',
             bygroups(Punctuation, String, Punctuation, Name.Attribute, Punctuation)),

            # HTML tags (pass through as-is)
            (r'<[^>\n]+>', Name.Builtin),

            # Plain text
            (r'[^!#`*_<>\[\n-]+', Text),
            (r'\n', Text),
            (r'.', Text),
        ],
    }
