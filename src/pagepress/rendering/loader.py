"""Page templates shipped next to this module.

Templates are plain markdown with ``str.format`` placeholders. Only the
pages listed in ``TEMPLATES`` can be loaded.
"""

from functools import lru_cache
from importlib.resources import files

TEMPLATES = frozenset({"about", "bookmarks"})


@lru_cache(maxsize=len(TEMPLATES))
def load_template(name: str) -> str:
    """Read the raw template for a page.

    Raises:
        ValueError: If ``name`` is not a known page template.
    """
    if name not in TEMPLATES:
        raise ValueError(f"Unknown page template: {name}")
    return files(__package__).joinpath("templates", f"{name}.md").read_text(encoding="utf-8")


def fill_template(name: str, **fields: str) -> str:
    """Load a page template and substitute its placeholders."""
    return load_template(name).format(**fields)
