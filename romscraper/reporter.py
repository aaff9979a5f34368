"""Report generation for ROM mappings (text dump, HTML, summary)."""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from romscraper import ConfidenceLevel, MatchResult
from romscraper.normalize import normalize_rom_name
from romscraper.scoring import title_similarity

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates'

UNRESOLVED_MARKER = '??'

# Empty lines written after each group of the text report
GROUP_SPACING = 4


def group_by_confidence(
    results: list[MatchResult],
) -> list[tuple[ConfidenceLevel, list[MatchResult]]]:
    """Group results by confidence level.

    Groups appear in the order their level is first seen; results keep
    their original order inside a group.
    """
    groups: dict[ConfidenceLevel, list[MatchResult]] = {}
    for result in results:
        groups.setdefault(result.confidence, []).append(result)
    return list(groups.items())


def format_result(result: MatchResult) -> str:
    """Render one result as a line of the text report.

    Results without a record or with an untitled record get the
    unresolved marker instead of id and title.
    """
    if result.record is None or not result.record.title:
        return f"## {result.rom_name} ==> {UNRESOLVED_MARKER}"
    return f"{result.rom_name} ==> {result.record.id} ==> {result.record.title}"


def render_text_report(results: list[MatchResult]) -> str:
    """Render the text report as a string."""
    lines: list[str] = []
    for level, group in group_by_confidence(results):
        lines.append(f"######### {level.label} #########")
        lines.extend(format_result(r) for r in group)
        lines.extend([''] * GROUP_SPACING)
    return ''.join(line + '\n' for line in lines)


def write_text_report(results: list[MatchResult], output_path: Path) -> None:
    """Write the mapping grouped by confidence level as plain text.

    Args:
        results: Match results in input order.
        output_path: Path for the output text file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_text_report(results), encoding='utf-8')
    log.info("Text-Report geschrieben: %s (%d Zeilen)", output_path, len(results))


def _result_to_row(result: MatchResult) -> dict:
    """Convert a MatchResult to a flat dict for the HTML output."""
    record = result.record
    similarity = ''
    if record and result.confidence is not ConfidenceLevel.EXACT:
        similarity = f'{title_similarity(normalize_rom_name(result.rom_name), record.title):.2f}'
    return {
        'rom_name': result.rom_name,
        'id': record.id if record else '',
        'title': (record.title if record else '') or UNRESOLVED_MARKER,
        'found': record is not None,
        'similarity': similarity,
    }


def _compute_stats(results: list[MatchResult]) -> dict:
    """Count results per confidence level, in enum order."""
    stats = {level.label: 0 for level in ConfidenceLevel}
    for r in results:
        stats[r.confidence.label] += 1
    stats['total'] = len(results)
    return stats


def write_html_report(
    results: list[MatchResult],
    output_path: Path,
    title: str = '',
) -> None:
    """Write the mapping as an HTML report using Jinja2.

    Args:
        results: Match results in input order.
        output_path: Path for the output HTML file.
        title: Heading of the report, e.g. the platform name.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template('report.html')

    groups = [
        (level.label, [_result_to_row(r) for r in group])
        for level, group in group_by_confidence(results)
    ]

    html = template.render(
        title=title,
        groups=groups,
        stats=_compute_stats(results),
    )

    output_path.write_text(html, encoding='utf-8')
    log.info("HTML-Report geschrieben: %s", output_path)


def print_summary(results: list[MatchResult], title: str = '') -> None:
    """Print the number of results per confidence level to stdout."""
    stats = _compute_stats(results)

    print(f"\n=== ROM-Zuordnung: {title} ===")
    print(f"Gesamt ROMs:               {stats['total']:>5}")
    print(f"Exakt (eindeutig):         {stats[ConfidenceLevel.EXACT.label]:>5}")
    print(f"Erster von mehreren:       {stats[ConfidenceLevel.FIRST_CANDIDATE.label]:>5}")
    print(f"Erstes Suchergebnis:       {stats[ConfidenceLevel.FIRST_SEARCH_RESULT.label]:>5}")
    print(f"Nicht gefunden:            {stats[ConfidenceLevel.NOT_FOUND.label]:>5}")
    print()
