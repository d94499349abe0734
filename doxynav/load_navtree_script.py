"""Logic for loading Doxygen navigation index scripts."""

import logging
import re
from pathlib import Path

import yaml

from doxynav.build_entries import build_entries
from doxynav.nav_script import NavScript
from doxynav.navtree_error import NavTreeError
from doxynav.split_js_variables import split_js_variables

logger = logging.getLogger(__name__)

# JS allows \' inside double-quoted strings, YAML does not.
JS_ESCAPED_QUOTE_RE = re.compile(r"(?<!\\)((?:\\\\)*)\\'")


def parse_navtree_script(text: str, path: Path | None = None) -> NavScript:
    """Parse the text of a navigation script into a NavScript."""
    source = str(path) if path else None
    script = NavScript(path=path)
    for var_name, literal in split_js_variables(text, source).items():
        # Array and string literals are YAML flow nodes once JS escapes are fixed.
        raw = JS_ESCAPED_QUOTE_RE.sub(r"\1'", literal)
        try:
            value = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            msg = f"Cannot decode value of '{var_name}': {e}"
            raise NavTreeError(msg, source) from e

        if isinstance(value, list) and all(isinstance(v, list) for v in value):
            script.trees[var_name] = build_entries(value, var_name)
        else:
            script.constants[var_name] = value

    logger.debug(
        "Parsed %s: %d tree(s), %d constant(s)",
        source or "<text>",
        len(script.trees),
        len(script.constants),
    )
    return script


def load_navtree_script(path: Path) -> NavScript:
    """Load and parse a navigation script from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"Script is not valid UTF-8: {e}"
        raise NavTreeError(msg, str(path)) from e
    return parse_navtree_script(text, path)
