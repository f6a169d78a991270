"""Write synthesized navigation to JSON artefacts for the site build.

Layouts load ``navigation.<locale>.json`` and ``footer.<locale>.json`` at
render time. Output is written with sorted keys and a trailing newline so
repeated builds over the same inventory produce byte-identical files.
"""

from __future__ import annotations

import json
import typing as typ

from ._constants import ARTEFACT_TEMPLATE

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .navigation import FooterData, NavigationData, NavigationSynthesizer


def dump_json(data: NavigationData | FooterData) -> str:
    """Serialize navigation output deterministically."""
    return json.dumps(data.to_dict(), ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def write_locale_artefacts(
    synthesizer: NavigationSynthesizer, locale: str, output_dir: Path
) -> list[Path]:
    """Write the header and footer JSON files for ``locale``.

    Parameters
    ----------
    synthesizer : NavigationSynthesizer
        Configured synthesizer used to build both channels.
    locale : str
        Locale to build.
    output_dir : Path
        Directory receiving the artefacts; created when missing.

    Returns
    -------
    list[Path]
        Paths of the written navigation and footer files, in that order.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    outputs = {
        "navigation": synthesizer.generate_navigation(locale),
        "footer": synthesizer.generate_footer_data(locale),
    }
    written: list[Path] = []
    for channel, data in outputs.items():
        path = output_dir / ARTEFACT_TEMPLATE.format(channel=channel, locale=locale)
        path.write_text(dump_json(data), encoding="utf-8")
        written.append(path)
    return written


__all__ = ["dump_json", "write_locale_artefacts"]
