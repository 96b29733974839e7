"""Walk a parsed document and report links whose targets do not exist."""

from pathlib import Path

from wikilink import Markdown, collect_wikilinks, new, with_resolve_destination

NOTES = Path("notes")


def resolve(raw: str) -> tuple[str, bool]:
    path = NOTES / f"{raw.strip()}.md"
    return path.as_posix(), path.exists()


md = Markdown(extensions=[new(with_resolve_destination(resolve))])
source = "Ideas: [[Inbox]], [[Projects:current work]]\n\nArchive: [[2019]]"
doc = md.parse(source, source_file="index.md")

for link in collect_wikilinks(doc):
    if not link.exists:
        print(f"{link.location}: missing {link.destination}")
