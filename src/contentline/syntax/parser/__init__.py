"""Content line parser module.

Module Organization:
- core.py: parse() entry point and ContentLineParser class
- rules.py: Grammar rules (names, parameters, parameter values)

Public API:
    parse: Parse bytes into Property | ParseError
    parse_or_raise: Same, raising ContentLineSyntaxError on failure
    ContentLineParser: Parser with input size limit and logging
"""

from contentline.syntax.parser.core import ContentLineParser, parse, parse_or_raise

__all__ = ["ContentLineParser", "parse", "parse_or_raise"]
