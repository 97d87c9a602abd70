"""
Layout Field Tokenizer

Splits one trimmed layout line into literal-text and field-reference tokens.

Bare whitespace-separated words are references; double-quoted spans are
literals. Quotes cannot be escaped inside a span, and an unterminated span at
the end of the line is still taken as a literal, so splitting never fails.
"""

from typing import List

from srg.contexts.layout.layout_data_structures import FieldPart, Literal, Reference

QUOTE = '"'
SEPARATOR = " "


def split_field_parts(line: str) -> List[FieldPart]:
    """
    Split a layout line into ordered field parts.

    Args:
        line: One trimmed line of layout text (e.g., 'start " - " end')

    Returns:
        Ordered list of Reference and Literal parts

    Examples:
        split_field_parts('a "b" c')
        # [Reference('a'), Literal('b'), Reference('c')]

        split_field_parts('" - "')
        # [Literal(' - ')]

        split_field_parts('"x')
        # [Literal('x')]
    """
    parts: List[FieldPart] = []
    buffer: List[str] = []
    in_quote = False

    for char in line:
        if char == QUOTE:
            if in_quote:
                # Closing quote: flush even an empty span ("" is a real literal)
                parts.append(Literal("".join(buffer)))
                buffer.clear()
            elif buffer:
                parts.append(Reference("".join(buffer)))
                buffer.clear()
            in_quote = not in_quote
        elif char == SEPARATOR and not in_quote:
            if buffer:
                parts.append(Reference("".join(buffer)))
                buffer.clear()
        else:
            buffer.append(char)

    if buffer:
        remainder = "".join(buffer)
        # Unclosed quote degrades to a literal
        parts.append(Literal(remainder) if in_quote else Reference(remainder))

    return parts
