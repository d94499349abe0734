"""Logic for fingerprinting the configuration a report was produced with."""

import hashlib
import json
from collections.abc import Iterable
from typing import Any

# Sections that change which issues or coverage gaps are reported.
# Output formatting (indent, base URL) is left out.
RESULT_SECTIONS = ("validation", "coverage", "ignore_symbols")


def compute_config_hash(
    config: dict[str, Any], sections: Iterable[str] = RESULT_SECTIONS
) -> str:
    """Compute a stable hash of the result-affecting configuration sections.

    Uses canonical JSON serialization (sorted keys), so two reports with
    the same hash were checked under the same rules.
    """
    relevant = {key: config[key] for key in sections if key in config}
    config_json = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
