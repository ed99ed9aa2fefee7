"""Quote parsing — split the raw quotes file into entries."""

from markupsafe import Markup

from .content import ContentStore


def parse_friends(raw: str) -> list[Markup]:
    """Split raw text into quote entries.

    Entries are separated by a blank line. Surrounding whitespace is trimmed,
    empty blocks are dropped and the remaining line breaks become ``<br>``.
    The file is trusted content, so entries are returned as ``Markup`` and are
    not escaped again by the template.
    """
    text = raw.replace("\r\n", "\n")
    friends = []
    for block in text.split("\n\n"):
        trimmed = block.strip()
        if trimmed:
            friends.append(Markup(trimmed.replace("\n", "<br>")))
    return friends


def load_friends(store: ContentStore, path: str) -> list[Markup]:
    """Read ``path`` from the store and parse it. Read errors propagate."""
    return parse_friends(store.read_text(path))
