"""Highlight a translatable message and print each span."""

from spanmark import Message, TextKind, collect_spans, select_highlighter

item = Message("  Hello <b>%(name)s</b>, you have {count} new messages\\n", format_flag="python")
highlighter = select_highlighter(item, TextKind.ALL)

for span in collect_spans(highlighter, item.string):
    print(f"{span.start:3}-{span.end:<3} {span.kind.name:<18} {span.slice(item.string)!r}")
