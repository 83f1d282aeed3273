"""Reference element tree used by the CLI when no tree file is given."""

from ..core.elements import Container, Heading, Text


def build_demo_tree() -> Container:
    """Return a container holding a heading above a longer line of text."""
    return Container(
        [
            Heading("Hello world"),
            Text("This is a long string of text"),
        ]
    )
