"""Render a small rich-text document — zero config, zero deps."""

from lienzo import BOLD, ITALIC, Document, Heading, Hyperlink, Mark, Paragraph, Text, render

doc = Document(
    content=(
        Heading(level=1, children=(Text("Hello"),)),
        Paragraph(
            children=(
                Text("Rendered with ", marks=()),
                Text("nested", marks=(Mark(BOLD), Mark(ITALIC))),
                Text(" marks and a "),
                Hyperlink(url="https://example.com", title="Example", children=(Text("link"),)),
                Text("."),
            )
        ),
    )
)

print(render(doc))
